import enum

from buildsource.exceptions import UnknownSourceTypeException


class SourceType(enum.Enum):
    CODECOMMIT = "CODECOMMIT"
    CODEPIPELINE = "CODEPIPELINE"
    GITHUB = "GITHUB"
    GITHUB_ENTERPRISE = "GITHUB_ENTERPRISE"
    BITBUCKET = "BITBUCKET"
    S3 = "S3"

    @classmethod
    def from_str(cls, value: str) -> "SourceType":
        try:
            return cls(str(value).upper())
        except ValueError:
            raise UnknownSourceTypeException(value)


class SourceAuthType(enum.Enum):
    OAUTH = "OAUTH"


class ArtifactsType(enum.Enum):
    CODEPIPELINE = "CODEPIPELINE"
    NO_ARTIFACTS = "NO_ARTIFACTS"
