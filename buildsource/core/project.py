import dataclasses
import logging
from typing import List, Optional

import pulumi

from buildsource.core.policy import BuildRole, PolicyStatement
from buildsource.io.aws.pulumi.project_resource import BuildProjectResource
from buildsource.sources._source import BuildSource
from buildsource.sources.codepipeline import CodePipelineSource
from buildsource.types.aws_types import AWSAccountID, AWSRegion
from buildsource.types.source_types import ArtifactsType


@dataclasses.dataclass(frozen=True)
class BuildEnvironment:
    compute_type: str = "BUILD_GENERAL1_SMALL"
    image: str = "aws/codebuild/standard:7.0"
    type: str = "LINUX_CONTAINER"
    privileged_mode: bool = False


@dataclasses.dataclass
class BuildProject:
    project_name: str
    source: BuildSource

    # optional args
    description: Optional[str] = None
    environment: BuildEnvironment = dataclasses.field(default_factory=BuildEnvironment)
    role: Optional[BuildRole] = None
    aws_region: Optional[AWSRegion] = None
    aws_account_id: Optional[AWSAccountID] = None

    def __post_init__(self):
        if self.role is None:
            self.role = BuildRole(role_name=f"{self.project_name}-role")
        # The source is bound exactly once, here. Binding again would grant its
        # permissions a second time.
        logging.debug(
            "binding %s to project %s", type(self.source).__name__, self.project_name
        )
        self.source.bind(self)

    def add_to_role_policy(self, statement: PolicyStatement):
        self.role.add_to_policy(statement)

    @property
    def artifacts_type(self) -> ArtifactsType:
        if isinstance(self.source, CodePipelineSource):
            return ArtifactsType.CODEPIPELINE
        return ArtifactsType.NO_ARTIFACTS

    def pulumi_resources(self, opts: pulumi.ResourceOptions) -> List[pulumi.Resource]:
        return [BuildProjectResource(project=self, opts=opts)]
