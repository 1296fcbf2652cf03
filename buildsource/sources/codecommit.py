import dataclasses
import logging

from buildsource.core.policy import PolicyStatement
from buildsource.io.aws.codecommit import CodeCommitRepository
from buildsource.sources._source import BuildSource
from buildsource.sources.descriptor import SourceDescriptor
from buildsource.types.source_types import SourceType


@dataclasses.dataclass(frozen=True)
class CodeCommitSource(BuildSource):
    repository: CodeCommitRepository

    def bind(self, project) -> None:
        # https://docs.aws.amazon.com/codebuild/latest/userguide/setting-up.html
        logging.debug(
            "granting codecommit:GitPull on %s", self.repository.repository_name
        )
        project.add_to_role_policy(
            PolicyStatement()
            .add_action("codecommit:GitPull")
            .add_resource(self.repository.repository_arn)
        )

    def describe(self) -> SourceDescriptor:
        return SourceDescriptor(
            type=SourceType.CODECOMMIT,
            location=self.repository.repository_clone_url_http,
        )
