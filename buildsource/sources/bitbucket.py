import dataclasses

from buildsource.sources._source import BuildSource
from buildsource.sources.descriptor import SourceDescriptor
from buildsource.types.aws_types import CloneURL
from buildsource.types.source_types import SourceType


@dataclasses.dataclass(frozen=True)
class BitBucketSource(BuildSource):
    https_clone_url: CloneURL

    def describe(self) -> SourceDescriptor:
        return SourceDescriptor(
            type=SourceType.BITBUCKET,
            location=self.https_clone_url,
        )
