import dataclasses
from typing import Any, Dict, Optional

import pulumi_aws

from buildsource.types.aws_types import OAuthToken, ResourceAttribute
from buildsource.types.source_types import SourceAuthType, SourceType


@dataclasses.dataclass(frozen=True)
class SourceAuth:
    resource: OAuthToken
    type: SourceAuthType = SourceAuthType.OAUTH

    def asdict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "resource": self.resource}


@dataclasses.dataclass(frozen=True)
class SourceDescriptor:
    """The source block of a CodeBuild project resource.

    `location` is only ever None for CodePipeline sources, and `auth` is only
    ever set for GitHub sources that were given a token.
    """

    type: SourceType
    location: Optional[ResourceAttribute] = None
    auth: Optional[SourceAuth] = None

    def asdict(self) -> Dict[str, Any]:
        # Absent fields are left out entirely rather than set to None.
        result: Dict[str, Any] = {"type": self.type.value}
        if self.location is not None:
            result["location"] = self.location
        if self.auth is not None:
            result["auth"] = self.auth.asdict()
        return result

    def to_pulumi_args(self) -> pulumi_aws.codebuild.ProjectSourceArgs:
        # NOTE: the aws provider no longer accepts auth on the source block, the
        # token is registered as a separate SourceCredential resource instead.
        # See BuildProjectResource.
        return pulumi_aws.codebuild.ProjectSourceArgs(
            type=self.type.value,
            location=self.location,
        )
