"""cfn_nag suppression metadata for CloudFormation resources"""
from dataclasses import dataclass
from typing import List

from aws_cdk import CfnResource


@dataclass(frozen=True)
class CfnNagSuppression:
    """A single cfn_nag rule suppression and its justification"""
    rule_id: str
    reason: str


def add_cfn_nag_suppressions(resource: CfnResource, suppressions: List[CfnNagSuppression]) -> None:
    """
    Attach cfn_nag suppressions to the complete definition of a resource.

    Existing suppressions on the resource are kept and the new ones are
    appended after them.

    Args:
        resource: L1 resource to annotate
        suppressions: Rules to suppress, in order
    """
    metadata = resource.get_metadata("cfn_nag") or {}
    rules = list(metadata.get("rules_to_suppress", []))
    rules.extend(
        {"id": suppression.rule_id, "reason": suppression.reason}
        for suppression in suppressions
    )

    resource.add_metadata("cfn_nag", {**metadata, "rules_to_suppress": rules})
