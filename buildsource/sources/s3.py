import dataclasses

import pulumi

from buildsource.io.aws.s3 import S3Bucket
from buildsource.sources._source import BuildSource
from buildsource.sources.descriptor import SourceDescriptor
from buildsource.types.shared_types import FilePath
from buildsource.types.source_types import SourceType


@dataclasses.dataclass(frozen=True)
class S3BucketSource(BuildSource):
    bucket: S3Bucket
    path: FilePath

    def bind(self, project) -> None:
        self.bucket.grant_read(project.role)

    def describe(self) -> SourceDescriptor:
        bucket_name = self.bucket.bucket_name
        if isinstance(bucket_name, pulumi.Output):
            # The bucket name is only known once pulumi has created the bucket.
            location = pulumi.Output.concat(bucket_name, "/", self.path)
        else:
            location = f"{bucket_name}/{self.path}"
        return SourceDescriptor(type=SourceType.S3, location=location)
