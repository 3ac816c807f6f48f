#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from typing import Optional

from aurora_snapshot.engine import ServerlessEngine
from aurora_snapshot.parameters.base import Base, Key, Setting


class ClusterKey(Key):
    ENGINE = "Engine"
    MIN_CAPACITY = "MinCapacity"
    MAX_CAPACITY = "MaxCapacity"
    AUTO_PAUSE_MINUTES = "AutoPauseMinutes"
    BACKUP_RETENTION_DAYS = "BackupRetentionDays"
    ENABLE_DATA_API = "EnableDataApi"


@dataclass
class ClusterSettings(Base):
    engine: str = Base.setting(
        Setting(
            id=ClusterKey.ENGINE,
            description="Serverless engine of the snapshot, e.g. aurora-mysql",
        ),
        default=ServerlessEngine.AURORA_MYSQL.engine_type,
    )

    min_capacity: Optional[int] = Base.setting(
        Setting(id=ClusterKey.MIN_CAPACITY, description="Minimum capacity in ACUs")
    )

    max_capacity: Optional[int] = Base.setting(
        Setting(id=ClusterKey.MAX_CAPACITY, description="Maximum capacity in ACUs")
    )

    auto_pause_minutes: Optional[int] = Base.setting(
        Setting(
            id=ClusterKey.AUTO_PAUSE_MINUTES,
            description="Idle minutes before the cluster pauses, 0 disables pausing",
        )
    )

    backup_retention_days: Optional[int] = Base.setting(
        Setting(
            id=ClusterKey.BACKUP_RETENTION_DAYS,
            description="Days automated backups are kept (1-35)",
        )
    )

    enable_data_api: Optional[bool] = Base.setting(
        Setting(id=ClusterKey.ENABLE_DATA_API, description="Enable the Data API")
    )
