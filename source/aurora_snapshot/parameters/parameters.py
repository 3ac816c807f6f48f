#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from typing import Any

from aurora_snapshot.parameters import cluster, common, credentials


@dataclass
class SnapshotClusterParameters(
    common.CommonParameters,
    cluster.ClusterSettings,
    credentials.CredentialsSettings,
):
    """
    This is where all the different categories of parameters and settings
    are combined using inheritance.
    """

    pass


class AllParameterGroups(common.CommonParameterGroups):
    """
    All the parameter groups are collated here
    """

    @classmethod
    def template_metadata(cls) -> dict[str, Any]:
        return {
            "AWS::CloudFormation::Interface": {
                "ParameterGroups": [
                    common.CommonParameterGroups.parameter_group_for_environment_and_snapshot,
                ]
            }
        }
