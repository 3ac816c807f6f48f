#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import hashlib
import json
import logging
import typing
from typing import Optional, Sequence

import aws_cdk
from aws_cdk import aws_kms as kms
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct

from aurora_snapshot import constants, exceptions
from aurora_snapshot.nag import NagSuppression, add_nag_suppression

logger = logging.getLogger(__name__)


class DatabaseSecret(secretsmanager.Secret):
    """
    Secrets Manager secret holding generated master credentials.

    The secret string is a JSON document {"username": <username>} into which
    Secrets Manager injects a generated "password" key at deployment time.
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        username: str,
        encryption_key: Optional[kms.IKey] = None,
        secret_name: Optional[str] = None,
        exclude_characters: Optional[str] = None,
        replica_regions: Optional[Sequence[secretsmanager.ReplicaRegion]] = None,
        replace_on_password_criteria_changes: bool = False,
    ):
        if not username:
            raise exceptions.configuration_error(
                "DatabaseSecret `username` must be a non-empty string"
            )

        super().__init__(
            scope,
            id,
            description=(
                f"{constants.GENERATED_SECRET_DESCRIPTION_PREFIX}"
                f"{aws_cdk.Aws.STACK_NAME}"
            ),
            encryption_key=encryption_key,
            secret_name=secret_name,
            replica_regions=list(replica_regions) if replica_regions else None,
            generate_secret_string=secretsmanager.SecretStringGenerator(
                exclude_characters=exclude_characters,
                generate_string_key=constants.SECRET_PASSWORD_KEY,
                password_length=constants.SECRET_PASSWORD_LENGTH,
                secret_string_template=DatabaseSecret.build_secret_string_template(
                    username
                ),
            ),
        )

        if replace_on_password_criteria_changes:
            self.replace_on_criteria_changes(exclude_characters)

        add_nag_suppression(
            self,
            suppressions=[
                NagSuppression(
                    rule_id="AwsSolutions-SMG4",
                    reason="Master credentials of a restored snapshot are not rotated by this stack.",
                )
            ],
        )

    @staticmethod
    def build_secret_string_template(username: str) -> str:
        return json.dumps(
            {constants.SECRET_USERNAME_KEY: username}, separators=(",", ":")
        )

    def replace_on_criteria_changes(self, exclude_characters: Optional[str]) -> None:
        # logical id suffix changes whenever the password criteria change,
        # which makes CloudFormation replace the secret
        criteria = json.dumps(
            {"excludeCharacters": exclude_characters}
            if exclude_characters is not None
            else {},
            separators=(",", ":"),
            ensure_ascii=False,
        )
        digest = hashlib.md5(criteria.encode("utf-8")).hexdigest()

        cfn_secret = typing.cast(aws_cdk.CfnResource, self.node.default_child)
        logical_id = f"{aws_cdk.Names.unique_id(self)}{digest}"
        cfn_secret.override_logical_id(logical_id[-255:])
        logger.debug("secret %s logical id suffixed with %s", self.node.path, digest)
