from typing import Union

import pulumi

AWSAccountID = str
AWSRegion = str

S3BucketName = str
CodeCommitRepositoryName = str

# An ARN or other attribute that is either known when the program is written or
# only resolved by pulumi at deploy time.
ARN = Union[str, pulumi.Output[str]]
ResourceAttribute = Union[str, pulumi.Output[str]]

CloneURL = str
OAuthToken = str
