import dataclasses
import logging
from typing import Optional

import pulumi
import pulumi_aws

from buildsource.core.policy import BuildRole, PolicyStatement
from buildsource.types.aws_types import ARN, AWSRegion, ResourceAttribute

_READ_ACTIONS = ["s3:GetObject*", "s3:GetBucket*", "s3:List*"]


@dataclasses.dataclass(frozen=True)
class S3Bucket:
    bucket_name: ResourceAttribute

    # optional args
    aws_region: Optional[AWSRegion] = None

    _bucket_arn: Optional[ARN] = dataclasses.field(default=None, repr=False)

    @property
    def bucket_arn(self) -> ARN:
        if self._bucket_arn is not None:
            return self._bucket_arn
        if isinstance(self.bucket_name, pulumi.Output):
            return pulumi.Output.concat("arn:aws:s3:::", self.bucket_name)
        return f"arn:aws:s3:::{self.bucket_name}"

    @property
    def objects_arn(self) -> ARN:
        bucket_arn = self.bucket_arn
        if isinstance(bucket_arn, pulumi.Output):
            return pulumi.Output.concat(bucket_arn, "/*")
        return f"{bucket_arn}/*"

    @classmethod
    def from_resource(
        cls, bucket: pulumi_aws.s3.BucketV2, *, aws_region: Optional[AWSRegion] = None
    ) -> "S3Bucket":
        return cls(
            bucket_name=bucket.bucket, aws_region=aws_region, _bucket_arn=bucket.arn
        )

    def grant_read(self, role: BuildRole):
        logging.debug(
            "granting read on bucket %s to role %s", self.bucket_name, role.role_name
        )
        role.add_to_policy(
            PolicyStatement(
                actions=list(_READ_ACTIONS),
                resources=[self.bucket_arn, self.objects_arn],
            )
        )
