import unittest

import pulumi

from buildsource.core.policy import BuildRole
from buildsource.io.aws.s3 import S3Bucket


class S3BucketTest(unittest.TestCase):
    def test_bucket_arn(self):
        bucket = S3Bucket(bucket_name="my-bucket", aws_region="us-east-1")

        self.assertEqual(bucket.bucket_arn, "arn:aws:s3:::my-bucket")
        self.assertEqual(bucket.objects_arn, "arn:aws:s3:::my-bucket/*")

    def test_grant_read(self):
        bucket = S3Bucket(bucket_name="my-bucket")
        role = BuildRole(role_name="test-role")

        bucket.grant_read(role)

        self.assertEqual(len(role.statements), 1)
        statement = role.statements[0]
        self.assertEqual(statement.effect, "Allow")
        self.assertEqual(
            statement.actions, ["s3:GetObject*", "s3:GetBucket*", "s3:List*"]
        )
        self.assertEqual(
            statement.resources, ["arn:aws:s3:::my-bucket", "arn:aws:s3:::my-bucket/*"]
        )

    @pulumi.runtime.test
    def test_deferred_bucket_arn(self):
        bucket = S3Bucket(bucket_name=pulumi.Output.from_input("later-bucket"))

        def check_arns(args):
            bucket_arn, objects_arn = args
            self.assertEqual(bucket_arn, "arn:aws:s3:::later-bucket")
            self.assertEqual(objects_arn, "arn:aws:s3:::later-bucket/*")

        return pulumi.Output.all(bucket.bucket_arn, bucket.objects_arn).apply(
            check_arns
        )


if __name__ == "__main__":
    unittest.main()
