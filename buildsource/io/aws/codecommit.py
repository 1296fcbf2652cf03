import dataclasses
from typing import Optional

import pulumi_aws

from buildsource.exceptions import MissingAWSSettingException
from buildsource.types.aws_types import (
    AWSAccountID,
    AWSRegion,
    CodeCommitRepositoryName,
    ResourceAttribute,
)


@dataclasses.dataclass(frozen=True)
class CodeCommitRepository:
    repository_name: CodeCommitRepositoryName
    aws_region: AWSRegion
    aws_account_id: AWSAccountID

    # Set when the handle wraps a pulumi resource, in which case these are only
    # known at deploy time.
    _repository_arn: Optional[ResourceAttribute] = dataclasses.field(
        default=None, repr=False
    )
    _repository_clone_url_http: Optional[ResourceAttribute] = dataclasses.field(
        default=None, repr=False
    )

    def __post_init__(self):
        # Both end up in the repository arn and clone url.
        if self.aws_region is None:
            raise MissingAWSSettingException(
                "aws_region", f"CodeCommit repository {self.repository_name}"
            )
        if self.aws_account_id is None:
            raise MissingAWSSettingException(
                "aws_account_id", f"CodeCommit repository {self.repository_name}"
            )

    @property
    def repository_arn(self) -> ResourceAttribute:
        if self._repository_arn is not None:
            return self._repository_arn
        return (
            f"arn:aws:codecommit:{self.aws_region}:"
            f"{self.aws_account_id}:{self.repository_name}"
        )

    @property
    def repository_clone_url_http(self) -> ResourceAttribute:
        if self._repository_clone_url_http is not None:
            return self._repository_clone_url_http
        return (
            f"https://git-codecommit.{self.aws_region}.amazonaws.com/v1/repos/"
            f"{self.repository_name}"
        )

    @classmethod
    def from_resource(
        cls,
        repository: pulumi_aws.codecommit.Repository,
        *,
        aws_region: AWSRegion,
        aws_account_id: AWSAccountID,
    ) -> "CodeCommitRepository":
        return cls(
            repository_name=repository.repository_name,
            aws_region=aws_region,
            aws_account_id=aws_account_id,
            _repository_arn=repository.arn,
            _repository_clone_url_http=repository.clone_url_http,
        )
