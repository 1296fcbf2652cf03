# flake8: noqa
import importlib.metadata

from .core.policy import BuildRole, PolicyStatement
from .core.project import BuildEnvironment, BuildProject
from .io.aws import CodeCommitRepository, S3Bucket
from .sources import (
    BitBucketSource,
    BuildSource,
    CodeCommitSource,
    CodePipelineSource,
    GitHubEnterpriseSource,
    GitHubSource,
    S3BucketSource,
    SourceAuth,
    SourceDescriptor,
)
from .types.source_types import SourceAuthType, SourceType

__version__ = importlib.metadata.version("buildsource")
