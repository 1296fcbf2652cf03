import unittest

import pulumi
import pulumi_aws

from buildsource.exceptions import MissingAWSSettingException
from buildsource.io.aws.codecommit import CodeCommitRepository


class CodeCommitRepositoryTest(unittest.TestCase):
    def test_literal_attributes(self):
        repository = CodeCommitRepository(
            repository_name="my-repo",
            aws_region="eu-west-1",
            aws_account_id="123456789012",
        )

        self.assertEqual(
            repository.repository_arn,
            "arn:aws:codecommit:eu-west-1:123456789012:my-repo",
        )
        self.assertEqual(
            repository.repository_clone_url_http,
            "https://git-codecommit.eu-west-1.amazonaws.com/v1/repos/my-repo",
        )

    def test_requires_region_and_account(self):
        with self.assertRaises(MissingAWSSettingException):
            CodeCommitRepository(
                repository_name="my-repo", aws_region=None, aws_account_id="1234"
            )
        with self.assertRaises(MissingAWSSettingException):
            CodeCommitRepository(
                repository_name="my-repo", aws_region="us-east-1", aws_account_id=None
            )

    @pulumi.runtime.test
    def test_from_resource(self):
        resource = pulumi_aws.codecommit.Repository(
            resource_name="my-repo", repository_name="my-repo"
        )

        repository = CodeCommitRepository.from_resource(
            resource, aws_region="us-east-1", aws_account_id="123456789012"
        )

        self.assertIsInstance(repository.repository_arn, pulumi.Output)

        def check_attributes(args):
            arn, clone_url = args
            self.assertEqual(arn, "arn:aws:codecommit:us-east-1:123456789012:my-repo")
            self.assertEqual(
                clone_url,
                "https://git-codecommit.us-east-1.amazonaws.com/v1/repos/my-repo",
            )

        return pulumi.Output.all(
            repository.repository_arn, repository.repository_clone_url_http
        ).apply(check_attributes)


if __name__ == "__main__":
    unittest.main()
