#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from typing import List

import aws_cdk as cdk
import constructs
from cdk_nag import NagPackSuppression, NagSuppressions
from pydantic import BaseModel


class NagSuppression(BaseModel):
    rule_id: str
    reason: str


def add_nag_suppression(
    construct: constructs.IConstruct,
    suppressions: List[NagSuppression],
    apply_to_children: bool = False,
) -> None:
    cdk_nag_suppressions = [
        NagPackSuppression(id=suppression.rule_id, reason=suppression.reason)
        for suppression in suppressions
    ]
    if isinstance(construct, cdk.Stack):
        NagSuppressions.add_stack_suppressions(
            stack=construct,
            suppressions=cdk_nag_suppressions,
            apply_to_nested_stacks=apply_to_children,
        )
    else:
        NagSuppressions.add_resource_suppressions(
            construct=construct,
            suppressions=cdk_nag_suppressions,
            apply_to_children=apply_to_children,
        )
