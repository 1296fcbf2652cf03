import dataclasses
import logging
import os
from typing import Any, Dict, Optional

import dacite

from buildsource import utils
from buildsource.config._config import Config
from buildsource.config.aws_options import AWSOptions
from buildsource.core.project import BuildEnvironment, BuildProject
from buildsource.sources.registry import source_from_dict
from buildsource.types.aws_types import AWSAccountID, AWSRegion
from buildsource.types.source_types import SourceType

BUILDSOURCE_CONFIG_FILE = "buildsource.yaml"


@dataclasses.dataclass
class BuildSourceConfig(Config):
    project_name: str
    source: Dict[str, Any]
    description: Optional[str] = None
    aws_region: Optional[AWSRegion] = None
    aws_account_id: Optional[AWSAccountID] = None
    environment: BuildEnvironment = dataclasses.field(default_factory=BuildEnvironment)

    @classmethod
    def default(cls, *, project_name: str) -> "BuildSourceConfig":
        return cls(
            project_name=project_name,
            source={"type": SourceType.CODEPIPELINE.value},
        )

    @classmethod
    def create(cls, directory: str, project_name: str) -> "BuildSourceConfig":
        config_path = os.path.join(directory, BUILDSOURCE_CONFIG_FILE)
        if os.path.exists(config_path):
            raise FileExistsError(
                f"buildsource config file already exists at {config_path}"
            )
        config = cls.default(project_name=project_name)
        config.dump(directory)
        return config

    @classmethod
    def load(
        cls, directory: str, aws_options: Optional[AWSOptions] = None
    ) -> "BuildSourceConfig":
        config_path = os.path.join(directory, BUILDSOURCE_CONFIG_FILE)
        utils.assert_path_exists(config_path)
        config_dict = utils.read_yaml_file(config_path)
        # Validate the source type up front so a bad config fails on load.
        SourceType.from_str(config_dict["source"]["type"])
        if config_dict.get("aws_account_id") is not None:
            # yaml parses unquoted account ids as ints
            config_dict["aws_account_id"] = str(config_dict["aws_account_id"])
        config = dacite.from_dict(data_class=cls, data=config_dict)
        if aws_options is not None:
            if config.aws_region is None:
                config.aws_region = aws_options.default_region
            if config.aws_account_id is None:
                config.aws_account_id = aws_options.default_account_id
        logging.debug("loaded buildsource config from %s", config_path)
        return config

    def dump(self, directory: str):
        config_path = os.path.join(directory, BUILDSOURCE_CONFIG_FILE)
        config_dict = {
            "project_name": self.project_name,
            "source": dict(self.source),
            "environment": dataclasses.asdict(self.environment),
        }
        if self.description is not None:
            config_dict["description"] = self.description
        if self.aws_region is not None:
            config_dict["aws_region"] = self.aws_region
        if self.aws_account_id is not None:
            config_dict["aws_account_id"] = self.aws_account_id
        utils.write_yaml_file(config_path, config_dict)

    def build_project(self) -> BuildProject:
        source = source_from_dict(
            self.source,
            aws_region=self.aws_region,
            aws_account_id=self.aws_account_id,
        )
        return BuildProject(
            project_name=self.project_name,
            source=source,
            description=self.description,
            environment=self.environment,
            aws_region=self.aws_region,
            aws_account_id=self.aws_account_id,
        )
