from typing import Any, Dict, Optional

from buildsource.io.aws.codecommit import CodeCommitRepository
from buildsource.io.aws.s3 import S3Bucket
from buildsource.sources._source import BuildSource
from buildsource.sources.bitbucket import BitBucketSource
from buildsource.sources.codecommit import CodeCommitSource
from buildsource.sources.codepipeline import CodePipelineSource
from buildsource.sources.github import GitHubEnterpriseSource, GitHubSource
from buildsource.sources.s3 import S3BucketSource
from buildsource.types.aws_types import AWSAccountID, AWSRegion
from buildsource.types.source_types import SourceType


def source_from_dict(
    source_dict: Dict[str, Any],
    *,
    aws_region: Optional[AWSRegion] = None,
    aws_account_id: Optional[AWSAccountID] = None,
) -> BuildSource:
    """Builds a source from its config file declaration.

    For example:

        source:
          type: S3
          bucket_name: my-bucket
          path: builds/source.zip

    Missing keys raise a KeyError, the same as any other malformed config.
    """
    source_type = SourceType.from_str(source_dict["type"])
    if source_type == SourceType.CODECOMMIT:
        account_id = source_dict.get("aws_account_id", aws_account_id)
        repository = CodeCommitRepository(
            repository_name=source_dict["repository_name"],
            aws_region=source_dict.get("aws_region", aws_region),
            # yaml parses unquoted account ids as ints
            aws_account_id=str(account_id) if account_id is not None else None,
        )
        return CodeCommitSource(repository)
    elif source_type == SourceType.CODEPIPELINE:
        return CodePipelineSource()
    elif source_type == SourceType.GITHUB:
        return GitHubSource(
            https_clone_url=source_dict["location"],
            oauth_token=source_dict.get("oauth_token"),
        )
    elif source_type == SourceType.GITHUB_ENTERPRISE:
        return GitHubEnterpriseSource(clone_url=source_dict["location"])
    elif source_type == SourceType.BITBUCKET:
        return BitBucketSource(https_clone_url=source_dict["location"])
    elif source_type == SourceType.S3:
        bucket = S3Bucket(
            bucket_name=source_dict["bucket_name"],
            aws_region=source_dict.get("aws_region", aws_region),
        )
        return S3BucketSource(bucket=bucket, path=source_dict["path"])
    raise ValueError(f"Unhandled source type: {source_type}")
