#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
"""
Master credential policy for clusters restored from a snapshot.

A snapshot already embeds the master username, so every override only
supplies a new password. The caller describes the desired credentials once
with one of the SnapshotCredentials variants (or an equivalent descriptor
mapping), and resolve_credentials() turns it into the MasterUsername /
MasterUserPassword fragment of the AWS::RDS::DBCluster resource, declaring a
generated secret into the construct tree when one is requested.
"""
import logging
from dataclasses import dataclass
from typing import (
    Any,
    Dict,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    TypedDict,
    Union,
)

import aws_cdk
from aws_cdk import aws_kms as kms
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct

from aurora_snapshot import constants, exceptions
from aurora_snapshot.secret import DatabaseSecret

logger = logging.getLogger(__name__)

USERNAME_REQUIRED_MESSAGE = (
    "`credentials` `username` must be specified when "
    "`generatePassword` is set to true"
)

ReplicaRegionLike = Union[secretsmanager.ReplicaRegion, Mapping[str, Any]]


class CredentialsDescriptor(TypedDict, total=False):
    generate_password: bool
    username: str
    password: aws_cdk.SecretValue
    secret: secretsmanager.ISecret
    exclude_characters: str
    replica_regions: Sequence[ReplicaRegionLike]
    encryption_key: kms.IKey


DESCRIPTOR_ALIASES = {
    "generatePassword": "generate_password",
    "excludeCharacters": "exclude_characters",
    "replicaRegions": "replica_regions",
    "encryptionKey": "encryption_key",
}

GENERATION_ONLY_OPTIONS = ("exclude_characters", "replica_regions", "encryption_key")


@dataclass(frozen=True)
class SnapshotCredentials:
    """
    Base of the closed set of credential variants. Use the factory methods
    rather than instantiating the variants directly.
    """

    @staticmethod
    def default() -> "DefaultCredentials":
        return DefaultCredentials()

    @staticmethod
    def from_generated_secret(
        username: str,
        exclude_characters: Optional[str] = None,
        replica_regions: Optional[Sequence[ReplicaRegionLike]] = None,
        encryption_key: Optional[kms.IKey] = None,
    ) -> "GeneratedSecretCredentials":
        return GeneratedSecretCredentials(
            username=username,
            exclude_characters=exclude_characters,
            replica_regions=to_replica_regions(replica_regions),
            encryption_key=encryption_key,
        )

    @staticmethod
    def from_password(value: aws_cdk.SecretValue) -> "FixedPasswordCredentials":
        return FixedPasswordCredentials(value=value)

    @staticmethod
    def from_secret(secret: secretsmanager.ISecret) -> "ExistingSecretCredentials":
        return ExistingSecretCredentials(secret=secret)

    @staticmethod
    def from_descriptor(descriptor: Mapping[str, Any]) -> "SnapshotCredentials":
        """
        Convert a loosely typed descriptor into one of the variants.

        Accepts snake_case keys as well as the camelCase aliases in
        DESCRIPTOR_ALIASES. At most one of generate_password, password and
        secret may be set.
        """
        values: Dict[str, Any] = {
            DESCRIPTOR_ALIASES.get(key, key): value
            for key, value in descriptor.items()
        }

        unknown = sorted(set(values) - set(CredentialsDescriptor.__annotations__))
        if unknown:
            raise exceptions.invalid_params(
                f"unknown `credentials` option(s): {', '.join(unknown)}"
            )

        generate_password = bool(values.get("generate_password"))
        mechanisms = [
            name
            for name, active in (
                ("generatePassword", generate_password),
                ("password", values.get("password") is not None),
                ("secret", values.get("secret") is not None),
            )
            if active
        ]
        if len(mechanisms) > 1:
            raise exceptions.configuration_error(
                "`credentials` accepts only one of `generatePassword`, `password` "
                f"or `secret`, got: {', '.join(mechanisms)}"
            )

        if generate_password:
            return SnapshotCredentials.from_generated_secret(
                username=values.get("username") or "",
                exclude_characters=values.get("exclude_characters"),
                replica_regions=values.get("replica_regions"),
                encryption_key=values.get("encryption_key"),
            )

        misplaced = [
            option
            for option in ("username",) + GENERATION_ONLY_OPTIONS
            if values.get(option) is not None
        ]
        if misplaced:
            raise exceptions.configuration_error(
                f"`credentials` option(s) {', '.join(misplaced)} can only be used "
                "when `generatePassword` is set to true"
            )

        if values.get("password") is not None:
            return SnapshotCredentials.from_password(values["password"])
        if values.get("secret") is not None:
            return SnapshotCredentials.from_secret(values["secret"])
        return SnapshotCredentials.default()


@dataclass(frozen=True)
class DefaultCredentials(SnapshotCredentials):
    """Keep the master credentials stored in the snapshot."""


@dataclass(frozen=True)
class GeneratedSecretCredentials(SnapshotCredentials):
    username: str
    exclude_characters: Optional[str] = None
    replica_regions: Optional[Tuple[secretsmanager.ReplicaRegion, ...]] = None
    encryption_key: Optional[kms.IKey] = None
    replace_on_password_criteria_changes: bool = True

    def __post_init__(self) -> None:
        if not self.username:
            raise exceptions.configuration_error(USERNAME_REQUIRED_MESSAGE)


@dataclass(frozen=True)
class FixedPasswordCredentials(SnapshotCredentials):
    value: aws_cdk.SecretValue


@dataclass(frozen=True)
class ExistingSecretCredentials(SnapshotCredentials):
    secret: secretsmanager.ISecret


@dataclass(frozen=True)
class ResolvedCredentials:
    master_username: Optional[str] = None
    master_user_password: Optional[str] = None
    secret: Optional[secretsmanager.ISecret] = None

    def to_cfn_properties(self) -> Dict[str, str]:
        """
        Keyword arguments for CfnDBCluster. Unset fields are left out so the
        restored cluster keeps the values stored in the snapshot.
        """
        properties: Dict[str, str] = {}
        if self.master_username is not None:
            properties["master_username"] = self.master_username
        if self.master_user_password is not None:
            properties["master_user_password"] = self.master_user_password
        return properties


def to_replica_regions(
    replica_regions: Optional[Sequence[ReplicaRegionLike]],
) -> Optional[Tuple[secretsmanager.ReplicaRegion, ...]]:
    if not replica_regions:
        return None
    result = []
    for replica in replica_regions:
        if isinstance(replica, secretsmanager.ReplicaRegion):
            result.append(replica)
            continue
        region = replica.get("region")
        if not region:
            raise exceptions.configuration_error(
                "replica region entries must specify a `region`"
            )
        result.append(
            secretsmanager.ReplicaRegion(
                region=region,
                encryption_key=replica.get("encryption_key")
                or replica.get("encryptionKey"),
            )
        )
    return tuple(result)


def resolve_credentials(
    scope: Construct,
    snapshot_identifier: str,
    credentials: Union[SnapshotCredentials, Mapping[str, Any], None] = None,
    secret_id: str = constants.DEFAULT_SECRET_ID,
) -> ResolvedCredentials:
    """
    Decide the master credential fields of a cluster restored from
    `snapshot_identifier`.

    A generated secret is declared under `scope` with `secret_id` before the
    deferred lookup referencing it is returned.
    """
    if not snapshot_identifier:
        raise exceptions.configuration_error(
            "`snapshot_identifier` must be a non-empty string"
        )

    if credentials is None:
        credentials = SnapshotCredentials.default()
    elif not isinstance(credentials, SnapshotCredentials):
        credentials = SnapshotCredentials.from_descriptor(credentials)

    if isinstance(credentials, DefaultCredentials):
        logger.debug(
            "restoring snapshot %s with its stored master credentials",
            snapshot_identifier,
        )
        return ResolvedCredentials()

    if isinstance(credentials, GeneratedSecretCredentials):
        secret = DatabaseSecret(
            scope,
            secret_id,
            username=credentials.username,
            encryption_key=credentials.encryption_key,
            exclude_characters=credentials.exclude_characters,
            replica_regions=credentials.replica_regions,
            replace_on_password_criteria_changes=credentials.replace_on_password_criteria_changes,
        )
        logger.info(
            "generated master password secret %s for snapshot %s",
            secret.node.path,
            snapshot_identifier,
        )
        return ResolvedCredentials(
            master_user_password=secret.secret_value_from_json(
                constants.SECRET_PASSWORD_KEY
            ).unsafe_unwrap(),
            secret=secret,
        )

    if isinstance(credentials, FixedPasswordCredentials):
        logger.debug("snapshot %s uses a fixed master password", snapshot_identifier)
        return ResolvedCredentials(
            master_user_password=credentials.value.unsafe_unwrap()
        )

    if isinstance(credentials, ExistingSecretCredentials):
        logger.debug(
            "snapshot %s reads its master password from an existing secret",
            snapshot_identifier,
        )
        return ResolvedCredentials(
            master_user_password=credentials.secret.secret_value_from_json(
                constants.SECRET_PASSWORD_KEY
            ).unsafe_unwrap()
        )

    raise exceptions.configuration_error(
        f"unsupported credentials type: {type(credentials).__name__}"
    )
