# Most of this is based on: https://github.com/link2aws/link2aws.github.io/tree/master

import dataclasses
import logging
from typing import List, Optional

_SERVICE_TEMPLATES = {
    "codebuild": lambda parsed_arn: f"https://{parsed_arn.region}.{parsed_arn.console}/codesuite/codebuild/{parsed_arn.account}/projects/{parsed_arn.resource}?region={parsed_arn.region}",  # noqa: E501
    "iam": lambda parsed_arn: f"https://{parsed_arn.console}/iam/home#/{parsed_arn.resource_type}s/{parsed_arn.resource}",  # noqa: E501
}


@dataclasses.dataclass
class _ParsedARN:
    prefix: str
    partition: str
    service: str
    region: str
    account: str
    resource: str
    resource_type: Optional[str]
    console: str = dataclasses.field(init=False)

    def __post_init__(self):
        if self.partition == "aws":
            self.console = "console.aws.amazon.com"
        elif self.partition == "aws-us-gov":
            self.console = "console.amazonaws-us-gov.com"
        elif self.partition == "aws-cn":
            self.console = "console.amazonaws.cn"
        else:
            self.console = ""
            raise ValueError(f"Unknown partition: {self.partition}")

    def console_url(self) -> str:
        if not self.console:
            return ""
        if self.service in _SERVICE_TEMPLATES:
            return _SERVICE_TEMPLATES[self.service](self)
        return ""


def _parse_resource(resource):
    first_separator_index = -1
    for idx, c in enumerate(resource):
        if c in (":", "/"):
            first_separator_index = idx
            break

    if first_separator_index != -1:
        resource_type = resource[:first_separator_index]
        resource = resource[first_separator_index + 1 :]
    else:
        resource_type = None

    return resource_type, resource


def arn_to_cloud_console_url(pulumi_output_arn: List[str]) -> str:
    if len(pulumi_output_arn) != 1:
        raise ValueError(f"Expected exactly one ARN, got {len(pulumi_output_arn)}")
    arn = pulumi_output_arn[0]
    try:
        prefix, partition, service, region, account, resource = arn.split(":", 5)
        resource_type, resource = _parse_resource(resource)

        parsed_arn = _ParsedARN(
            prefix=prefix,
            partition=partition,
            service=service,
            region=region,
            account=account,
            resource=resource,
            resource_type=resource_type,
        )
        return parsed_arn.console_url()
    except Exception:
        logging.exception(f"Failed to parse ARN into a console URL: {arn}")
        return ""
