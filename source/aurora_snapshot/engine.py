#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

import aws_cdk
from aws_cdk import aws_rds as rds

from aurora_snapshot import constants, exceptions


class ServerlessEngine(Enum):
    """
    Database engines supported by Aurora Serverless (EngineMode "serverless").
    Each member carries the CloudFormation engine name, the family of the
    default cluster parameter group and the default listener port.
    """

    AURORA = ("aurora", "aurora5.6", 3306)
    AURORA_MYSQL = ("aurora-mysql", "aurora-mysql5.7", 3306)
    AURORA_POSTGRESQL = ("aurora-postgresql", "aurora-postgresql10", 5432)

    def __init__(
        self, engine_type: str, parameter_group_family: str, default_port: int
    ) -> None:
        self.engine_type = engine_type
        self.parameter_group_family = parameter_group_family
        self.default_port = default_port

    @property
    def default_parameter_group_name(self) -> str:
        return f"default.{self.parameter_group_family}"

    @classmethod
    def of(cls, engine_type: str) -> "ServerlessEngine":
        for engine in cls:
            if engine.engine_type == engine_type:
                return engine
        supported = ", ".join(engine.engine_type for engine in cls)
        raise exceptions.configuration_error(
            f"unsupported serverless engine: {engine_type}. "
            f"supported engines: {supported}"
        )


class AuroraCapacityUnit(IntEnum):
    ACU_1 = 1
    ACU_2 = 2
    ACU_4 = 4
    ACU_8 = 8
    ACU_16 = 16
    ACU_32 = 32
    ACU_64 = 64
    ACU_128 = 128
    ACU_192 = 192
    ACU_256 = 256
    ACU_384 = 384


class TimeoutAction(str, Enum):
    ROLLBACK_CAPACITY_CHANGE = "RollbackCapacityChange"
    FORCE_APPLY_CAPACITY_CHANGE = "ForceApplyCapacityChange"


@dataclass(frozen=True)
class ServerlessScalingOptions:
    """
    Scaling behaviour of the serverless cluster.

    An auto_pause of zero disables pausing, any other value must be between
    5 minutes and 1 day.
    """

    auto_pause: Optional[aws_cdk.Duration] = None
    min_capacity: Optional[AuroraCapacityUnit] = None
    max_capacity: Optional[AuroraCapacityUnit] = None
    timeout_action: Optional[TimeoutAction] = None

    def __post_init__(self) -> None:
        if (
            self.min_capacity is not None
            and self.max_capacity is not None
            and self.max_capacity < self.min_capacity
        ):
            raise exceptions.configuration_error(
                f"maximum capacity ({int(self.max_capacity)}) must be greater than "
                f"or equal to minimum capacity ({int(self.min_capacity)})"
            )
        seconds = self.auto_pause_seconds
        if seconds is not None and seconds != 0:
            if (
                seconds < constants.MIN_AUTO_PAUSE_SECONDS
                or seconds > constants.MAX_AUTO_PAUSE_SECONDS
            ):
                raise exceptions.configuration_error(
                    "auto pause time must be between 5 minutes and 1 day, "
                    f"got {seconds} seconds"
                )

    @property
    def auto_pause_seconds(self) -> Optional[int]:
        if self.auto_pause is None:
            return None
        return int(self.auto_pause.to_seconds())

    def to_property(self) -> rds.CfnDBCluster.ScalingConfigurationProperty:
        seconds = self.auto_pause_seconds
        return rds.CfnDBCluster.ScalingConfigurationProperty(
            auto_pause=seconds != 0,
            min_capacity=(
                int(self.min_capacity) if self.min_capacity is not None else None
            ),
            max_capacity=(
                int(self.max_capacity) if self.max_capacity is not None else None
            ),
            seconds_until_auto_pause=seconds if seconds else None,
            timeout_action=(
                self.timeout_action.value if self.timeout_action is not None else None
            ),
        )
