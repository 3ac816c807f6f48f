#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from aurora_snapshot.parameters.base import Base, Key, Setting


class CredentialsKey(Key):
    MODE = "CredentialsMode"
    MASTER_USERNAME = "MasterUsername"
    EXCLUDE_CHARACTERS = "ExcludeCharacters"
    REPLICA_REGIONS = "ReplicaRegions"
    SECRET_ARN = "SecretArn"
    MASTER_USER_PASSWORD = "MasterUserPassword"


class CredentialsMode(str, Enum):
    DEFAULT = "default"
    GENERATED = "generated"
    PASSWORD = "password"
    SECRET = "secret"


@dataclass
class CredentialsSettings(Base):
    """
    Master credential settings of the restored cluster.

    "default" keeps the credentials stored in the snapshot, "generated"
    creates a new secret for master_username, "password" asks for a NoEcho
    MasterUserPassword parameter at deployment time and "secret" reads the
    password from the existing secret secret_arn.
    """

    credentials_mode: str = Base.setting(
        Setting(id=CredentialsKey.MODE), default=CredentialsMode.DEFAULT.value
    )

    master_username: Optional[str] = Base.setting(
        Setting(
            id=CredentialsKey.MASTER_USERNAME,
            description="Master username stored in the generated secret",
        )
    )

    exclude_characters: Optional[str] = Base.setting(
        Setting(
            id=CredentialsKey.EXCLUDE_CHARACTERS,
            description="Characters excluded from the generated password",
        )
    )

    replica_regions: Optional[list[str]] = Base.setting(
        Setting(
            id=CredentialsKey.REPLICA_REGIONS,
            description="Regions the generated secret is replicated to",
        )
    )

    secret_arn: Optional[str] = Base.setting(
        Setting(
            id=CredentialsKey.SECRET_ARN,
            description="Complete ARN of an existing secret holding the password",
        )
    )
