import dataclasses
from typing import Any, Dict, List

import pulumi_aws

from buildsource.types.aws_types import ARN


@dataclasses.dataclass
class PolicyStatement:
    actions: List[str] = dataclasses.field(default_factory=list)
    resources: List[ARN] = dataclasses.field(default_factory=list)
    effect: str = "Allow"

    def add_action(self, action: str) -> "PolicyStatement":
        self.actions.append(action)
        return self

    def add_resource(self, resource: ARN) -> "PolicyStatement":
        self.resources.append(resource)
        return self

    def to_pulumi_args(self) -> pulumi_aws.iam.GetPolicyDocumentStatementArgs:
        return pulumi_aws.iam.GetPolicyDocumentStatementArgs(
            effect=self.effect,
            actions=list(self.actions),
            resources=list(self.resources),
        )

    def asdict(self) -> Dict[str, Any]:
        """Returns the statement in the IAM policy JSON shape.

        Resources that are still pulumi outputs are included as-is, so this is
        only json serializable once every resource is a plain string.
        """
        return {
            "Effect": self.effect,
            "Action": list(self.actions),
            "Resource": list(self.resources),
        }


@dataclasses.dataclass
class BuildRole:
    role_name: str
    statements: List[PolicyStatement] = dataclasses.field(default_factory=list)

    # NOTE: statements are not deduplicated. Granting the same access twice
    # results in two identical statements.
    def add_to_policy(self, statement: PolicyStatement):
        self.statements.append(statement)

    def policy_document(self) -> Dict[str, Any]:
        return {
            "Version": "2012-10-17",
            "Statement": [s.asdict() for s in self.statements],
        }
