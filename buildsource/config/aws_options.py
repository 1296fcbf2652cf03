import dataclasses
from typing import Optional

from buildsource.config._config import Config
from buildsource.types.aws_types import AWSAccountID, AWSRegion


@dataclasses.dataclass
class AWSOptions(Config):
    default_region: Optional[AWSRegion] = None
    default_account_id: Optional[AWSAccountID] = None

    @classmethod
    def default(cls) -> "AWSOptions":
        return cls(default_region=None, default_account_id=None)
