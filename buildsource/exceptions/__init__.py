# flake8: noqa
from .exceptions import (
    MissingAWSSettingException,
    PathNotFoundException,
    UnknownSourceTypeException,
)
