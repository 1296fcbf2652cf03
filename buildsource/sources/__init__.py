# flake8: noqa
from ._source import BuildSource
from .bitbucket import BitBucketSource
from .codecommit import CodeCommitSource
from .codepipeline import CodePipelineSource
from .descriptor import SourceAuth, SourceDescriptor
from .github import GitHubEnterpriseSource, GitHubSource
from .s3 import S3BucketSource
