import unittest

import pulumi

from buildsource.core.project import BuildProject
from buildsource.io.aws.s3 import S3Bucket
from buildsource.sources.s3 import S3BucketSource


class S3BucketSourceTest(unittest.TestCase):
    def test_describe(self):
        source = S3BucketSource(bucket=S3Bucket("my-bucket"), path="src/app.zip")

        descriptor = source.describe()

        self.assertEqual(
            descriptor.asdict(), {"type": "S3", "location": "my-bucket/src/app.zip"}
        )
        self.assertEqual(descriptor, source.describe())

    def test_bind_grants_read_once(self):
        source = S3BucketSource(bucket=S3Bucket("my-bucket"), path="src/app.zip")

        project = BuildProject(project_name="test-project", source=source)

        statements = project.role.statements
        self.assertEqual(len(statements), 1)
        self.assertEqual(
            statements[0].actions, ["s3:GetObject*", "s3:GetBucket*", "s3:List*"]
        )
        self.assertEqual(
            statements[0].resources,
            ["arn:aws:s3:::my-bucket", "arn:aws:s3:::my-bucket/*"],
        )

    @pulumi.runtime.test
    def test_describe_deferred_bucket_name(self):
        bucket = S3Bucket(bucket_name=pulumi.Output.from_input("deferred-bucket"))
        source = S3BucketSource(bucket=bucket, path="src/app.zip")

        location = source.describe().location

        self.assertIsInstance(location, pulumi.Output)

        def check_location(value):
            self.assertEqual(value, "deferred-bucket/src/app.zip")

        return location.apply(check_location)


if __name__ == "__main__":
    unittest.main()
