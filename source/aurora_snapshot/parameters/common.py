#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from typing import Any

from aurora_snapshot.parameters.base import Attributes, Base, Key


class CommonKey(Key):
    ENVIRONMENT_NAME = "EnvironmentName"
    SNAPSHOT_IDENTIFIER = "SnapshotIdentifier"


@dataclass
class CommonParameters(Base):
    environment_name: str = Base.parameter(
        Attributes(
            id=CommonKey.ENVIRONMENT_NAME,
            type="String",
            description=(
                "Name of the environment. Used to tag every resource created "
                "for the restored cluster."
            ),
            allowed_pattern="[A-Za-z][A-Za-z0-9\\-]{0,31}",
            constraint_description=(
                "EnvironmentName must start with a letter and contain at most 32 "
                "letters, numbers or hyphens."
            ),
        )
    )

    snapshot_identifier: str = Base.parameter(
        Attributes(
            id=CommonKey.SNAPSHOT_IDENTIFIER,
            type="String",
            description=(
                "Identifier or ARN of the DB cluster snapshot to restore the "
                "serverless cluster from."
            ),
            allowed_pattern=".+",
            constraint_description="SnapshotIdentifier is required.",
        )
    )


class CommonParameterGroups:
    parameter_group_for_environment_and_snapshot: dict[str, Any] = {
        "Label": {"default": "Environment and snapshot details"},
        "Parameters": [
            CommonKey.ENVIRONMENT_NAME,
            CommonKey.SNAPSHOT_IDENTIFIER,
        ],
    }
