# flake8: noqa
from .codecommit import CodeCommitRepository
from .s3 import S3Bucket
