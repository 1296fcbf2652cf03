import dataclasses

from buildsource.sources._source import BuildSource
from buildsource.sources.descriptor import SourceDescriptor
from buildsource.types.source_types import SourceType


@dataclasses.dataclass(frozen=True)
class CodePipelineSource(BuildSource):
    # TODO: grant the project access to the pipeline's artifact bucket once
    # pipelines are modeled here.
    def bind(self, project) -> None:
        return None

    def describe(self) -> SourceDescriptor:
        return SourceDescriptor(type=SourceType.CODEPIPELINE)
