#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import importlib.metadata
import logging
from typing import Any, Optional, Union

import aws_cdk
from aws_cdk import Environment, IStackSynthesizer, SecretValue, Stack, Tags
from aws_cdk import aws_ec2 as ec2
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct

from aurora_snapshot import constants, exceptions
from aurora_snapshot.cluster import ServerlessClusterFromSnapshot
from aurora_snapshot.credentials import SnapshotCredentials
from aurora_snapshot.engine import (
    AuroraCapacityUnit,
    ServerlessEngine,
    ServerlessScalingOptions,
)
from aurora_snapshot.nag import NagSuppression, add_nag_suppression
from aurora_snapshot.parameters.common import CommonKey
from aurora_snapshot.parameters.credentials import CredentialsKey, CredentialsMode
from aurora_snapshot.parameters.parameters import (
    AllParameterGroups,
    SnapshotClusterParameters,
)

logger = logging.getLogger(__name__)


class SnapshotClusterStack(Stack):
    def __init__(
        self,
        scope: Construct,
        stack_id: str,
        parameters: Optional[SnapshotClusterParameters] = None,
        vpc: Optional[ec2.IVpc] = None,
        env: Union[Environment, dict[str, Any], None] = None,
        synthesizer: Optional[IStackSynthesizer] = None,
    ):
        super().__init__(
            scope,
            stack_id,
            env=env,
            synthesizer=synthesizer,
            description=f"AuroraSnapshot_{importlib.metadata.version(constants.DISTRIBUTION_NAME)}",
        )

        self.parameters = (
            parameters if parameters is not None else SnapshotClusterParameters()
        )
        self.parameters.generate(self)
        self.template_options.metadata = AllParameterGroups.template_metadata()

        self.vpc = vpc if vpc is not None else self.get_vpc()

        self.cluster = ServerlessClusterFromSnapshot(
            self,
            constants.CLUSTER_CONSTRUCT_ID,
            engine=ServerlessEngine.of(self.parameters.engine),
            vpc=self.vpc,
            snapshot_identifier=self.parameters.get_str(CommonKey.SNAPSHOT_IDENTIFIER),
            credentials=self.get_credentials(),
            scaling=self.get_scaling_options(),
            backup_retention=self.get_backup_retention(),
            enable_data_api=self.parameters.enable_data_api,
        )
        self.add_tags(self.cluster)

        self.add_outputs()

    def get_vpc(self) -> ec2.Vpc:
        vpc = ec2.Vpc(self, "VPC", max_azs=2, nat_gateways=1)
        self.add_tags(vpc)
        add_nag_suppression(
            vpc,
            suppressions=[
                NagSuppression(
                    rule_id="AwsSolutions-VPC7",
                    reason="Flow logs are managed outside of the database stack.",
                )
            ],
        )
        return vpc

    def get_credentials(self) -> SnapshotCredentials:
        try:
            mode = CredentialsMode(self.parameters.credentials_mode)
        except ValueError as e:
            supported = ", ".join(m.value for m in CredentialsMode)
            raise exceptions.configuration_error(
                f"unsupported credentials mode: {self.parameters.credentials_mode}. "
                f"supported modes: {supported}"
            ) from e

        logger.info("master credentials mode: %s", mode.value)

        if mode == CredentialsMode.GENERATED:
            return SnapshotCredentials.from_generated_secret(
                username=self.parameters.master_username or "",
                exclude_characters=self.parameters.exclude_characters,
                replica_regions=[
                    {"region": region}
                    for region in (self.parameters.replica_regions or [])
                ],
            )

        if mode == CredentialsMode.PASSWORD:
            password = aws_cdk.CfnParameter(
                self,
                CredentialsKey.MASTER_USER_PASSWORD.value,
                type="String",
                no_echo=True,
                min_length=8,
                description="New master password of the restored cluster",
            )
            return SnapshotCredentials.from_password(
                SecretValue.cfn_parameter(password)
            )

        if mode == CredentialsMode.SECRET:
            if not self.parameters.secret_arn:
                raise exceptions.configuration_error(
                    f"`{CredentialsKey.SECRET_ARN.value}` must be specified when "
                    f"`{CredentialsKey.MODE.value}` is set to {mode.value}"
                )
            secret = secretsmanager.Secret.from_secret_complete_arn(
                self, "MasterUserSecret", self.parameters.secret_arn
            )
            return SnapshotCredentials.from_secret(secret)

        return SnapshotCredentials.default()

    def get_scaling_options(self) -> Optional[ServerlessScalingOptions]:
        if (
            self.parameters.min_capacity is None
            and self.parameters.max_capacity is None
            and self.parameters.auto_pause_minutes is None
        ):
            return None
        try:
            return ServerlessScalingOptions(
                auto_pause=(
                    aws_cdk.Duration.minutes(self.parameters.auto_pause_minutes)
                    if self.parameters.auto_pause_minutes is not None
                    else None
                ),
                min_capacity=(
                    AuroraCapacityUnit(self.parameters.min_capacity)
                    if self.parameters.min_capacity is not None
                    else None
                ),
                max_capacity=(
                    AuroraCapacityUnit(self.parameters.max_capacity)
                    if self.parameters.max_capacity is not None
                    else None
                ),
            )
        except ValueError as e:
            raise exceptions.invalid_params(
                "capacity must be one of "
                f"{', '.join(str(int(unit)) for unit in AuroraCapacityUnit)}",
                exc=e,
            ) from e

    def get_backup_retention(self) -> Optional[aws_cdk.Duration]:
        if self.parameters.backup_retention_days is None:
            return None
        return aws_cdk.Duration.days(self.parameters.backup_retention_days)

    def add_tags(self, construct: Construct) -> None:
        Tags.of(construct).add(
            key=constants.TAG_ENVIRONMENT_NAME,
            value=self.parameters.get_str(CommonKey.ENVIRONMENT_NAME),
        )
        Tags.of(construct).add(
            key=constants.TAG_MODULE_NAME,
            value=constants.MODULE_DATABASE,
        )

    def add_outputs(self) -> None:
        aws_cdk.CfnOutput(
            self,
            "ClusterIdentifier",
            value=self.cluster.cluster_identifier,
        )
        aws_cdk.CfnOutput(
            self,
            "ClusterEndpoint",
            value=self.cluster.cluster_endpoint_address,
        )
        if self.cluster.secret is not None:
            aws_cdk.CfnOutput(
                self,
                "SecretArn",
                value=self.cluster.secret.secret_arn,
            )
