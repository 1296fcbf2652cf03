import dataclasses
from typing import Optional

from buildsource.sources._source import BuildSource
from buildsource.sources.descriptor import SourceAuth, SourceDescriptor
from buildsource.types.aws_types import CloneURL, OAuthToken
from buildsource.types.source_types import SourceType


@dataclasses.dataclass(frozen=True)
class GitHubSource(BuildSource):
    https_clone_url: CloneURL
    oauth_token: Optional[OAuthToken] = dataclasses.field(default=None, repr=False)

    def describe(self) -> SourceDescriptor:
        auth = None
        # Only a missing token suppresses auth, an empty string is still sent.
        if self.oauth_token is not None:
            auth = SourceAuth(resource=self.oauth_token)
        return SourceDescriptor(
            type=SourceType.GITHUB,
            location=self.https_clone_url,
            auth=auth,
        )


@dataclasses.dataclass(frozen=True)
class GitHubEnterpriseSource(BuildSource):
    clone_url: CloneURL

    def describe(self) -> SourceDescriptor:
        return SourceDescriptor(
            type=SourceType.GITHUB_ENTERPRISE,
            location=self.clone_url,
        )
