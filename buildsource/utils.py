import os
from typing import Any, Dict

import yaml

from buildsource.exceptions import PathNotFoundException


def write_yaml_file(file_path: str, data: Any):
    directory = os.path.dirname(file_path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory)
    with open(file_path, "w") as f:
        yaml.dump(data, f, indent=4, sort_keys=False)


def read_yaml_file(file_path: str) -> Dict[str, Any]:
    if not os.path.exists(file_path):
        return {}
    with open(file_path, "r") as f:
        return yaml.safe_load(f) or {}


def assert_path_exists(path: str):
    if not os.path.exists(path):
        raise PathNotFoundException(f"Path {path} does not exist.")
