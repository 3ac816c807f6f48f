#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import logging
from typing import Any, List, Mapping, Optional, Sequence, Union

import aws_cdk
from aws_cdk import aws_ec2 as ec2
from aws_cdk import aws_kms as kms
from aws_cdk import aws_rds as rds
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct

from aurora_snapshot import constants, exceptions
from aurora_snapshot.credentials import SnapshotCredentials, resolve_credentials
from aurora_snapshot.engine import ServerlessEngine, ServerlessScalingOptions
from aurora_snapshot.nag import NagSuppression, add_nag_suppression

logger = logging.getLogger(__name__)


class ServerlessClusterFromSnapshot(Construct):
    """
    Aurora Serverless cluster restored from a DB cluster snapshot.

    The restored cluster is always encrypted and, unless told otherwise,
    keeps the master credentials stored in the snapshot.
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        engine: ServerlessEngine,
        vpc: ec2.IVpc,
        snapshot_identifier: str,
        credentials: Union[SnapshotCredentials, Mapping[str, Any], None] = None,
        vpc_subnets: Optional[ec2.SubnetSelection] = None,
        security_groups: Optional[Sequence[ec2.ISecurityGroup]] = None,
        parameter_group_name: Optional[str] = None,
        storage_encryption_key: Optional[kms.IKey] = None,
        backup_retention: Optional[aws_cdk.Duration] = None,
        scaling: Optional[ServerlessScalingOptions] = None,
        deletion_protection: Optional[bool] = None,
        enable_data_api: Optional[bool] = None,
        cluster_identifier: Optional[str] = None,
        copy_tags_to_snapshot: Optional[bool] = None,
        removal_policy: aws_cdk.RemovalPolicy = aws_cdk.RemovalPolicy.SNAPSHOT,
    ):
        super().__init__(scope, id)
        self.engine = engine
        self.vpc = vpc

        backup_retention_period = self.get_backup_retention_period(backup_retention)
        subnet_ids = self.get_subnet_ids(vpc_subnets)

        resolved = resolve_credentials(self, snapshot_identifier, credentials)

        self.subnet_group = rds.CfnDBSubnetGroup(
            self,
            "Subnets",
            db_subnet_group_description=f"Subnets for {id} database",
            subnet_ids=subnet_ids,
        )

        self.security_groups: List[ec2.ISecurityGroup] = (
            list(security_groups)
            if security_groups
            else [
                ec2.SecurityGroup(
                    self,
                    "SecurityGroup",
                    vpc=vpc,
                    description=constants.SECURITY_GROUP_DESCRIPTION,
                )
            ]
        )

        self.cluster = rds.CfnDBCluster(
            self,
            "Resource",
            engine=engine.engine_type,
            engine_mode=constants.ENGINE_MODE_SERVERLESS,
            db_cluster_identifier=cluster_identifier,
            db_cluster_parameter_group_name=(
                parameter_group_name or engine.default_parameter_group_name
            ),
            db_subnet_group_name=self.subnet_group.ref,
            vpc_security_group_ids=[
                security_group.security_group_id
                for security_group in self.security_groups
            ],
            snapshot_identifier=snapshot_identifier,
            storage_encrypted=True,
            kms_key_id=(
                storage_encryption_key.key_arn if storage_encryption_key else None
            ),
            backup_retention_period=backup_retention_period,
            scaling_configuration=scaling.to_property() if scaling else None,
            deletion_protection=self.get_deletion_protection(
                deletion_protection, removal_policy
            ),
            enable_http_endpoint=enable_data_api,
            copy_tags_to_snapshot=copy_tags_to_snapshot,
            **resolved.to_cfn_properties(),
        )
        self.cluster.apply_removal_policy(removal_policy)

        self.secret: Optional[secretsmanager.ISecret] = None
        self.secret_attachment = None
        if resolved.secret is not None:
            self.secret = resolved.secret
            self.secret_attachment = secretsmanager.CfnSecretTargetAttachment(
                self,
                "SecretAttachment",
                secret_id=resolved.secret.secret_arn,
                target_id=self.cluster.ref,
                target_type=constants.CLUSTER_RESOURCE_TYPE,
            )

        self.connections = ec2.Connections(
            security_groups=self.security_groups,
            default_port=ec2.Port.tcp(engine.default_port),
        )

        add_nag_suppression(
            self.cluster,
            suppressions=[
                NagSuppression(
                    rule_id="AwsSolutions-RDS6",
                    reason="IAM database authentication is not available for Aurora Serverless v1.",
                ),
                NagSuppression(
                    rule_id="AwsSolutions-RDS11",
                    reason="The restored cluster listens on the engine default port.",
                ),
                NagSuppression(
                    rule_id="AwsSolutions-RDS16",
                    reason="Log exports are not available for Aurora Serverless v1.",
                ),
            ],
        )

        logger.info(
            "serverless %s cluster %s restored from snapshot %s",
            engine.engine_type,
            self.node.path,
            snapshot_identifier,
        )

    @property
    def cluster_identifier(self) -> str:
        return self.cluster.ref

    @property
    def cluster_endpoint_address(self) -> str:
        return self.cluster.attr_endpoint_address

    @property
    def cluster_endpoint_port(self) -> str:
        return self.cluster.attr_endpoint_port

    @property
    def cluster_read_endpoint_address(self) -> str:
        return self.cluster.attr_read_endpoint_address

    def get_subnet_ids(self, vpc_subnets: Optional[ec2.SubnetSelection]) -> List[str]:
        selection = vpc_subnets or ec2.SubnetSelection(
            subnet_type=ec2.SubnetType.PRIVATE_WITH_EGRESS
        )
        selected = self.vpc.select_subnets(
            availability_zones=selection.availability_zones,
            one_per_az=selection.one_per_az,
            subnet_filters=selection.subnet_filters,
            subnet_group_name=selection.subnet_group_name,
            subnets=selection.subnets,
            subnet_type=selection.subnet_type,
        )
        subnet_ids = list(selected.subnet_ids)
        if len(subnet_ids) < constants.MIN_CLUSTER_SUBNETS:
            raise exceptions.configuration_error(
                f"Cluster requires at least {constants.MIN_CLUSTER_SUBNETS} "
                f"subnets, got {len(subnet_ids)}"
            )
        return subnet_ids

    @staticmethod
    def get_backup_retention_period(
        backup_retention: Optional[aws_cdk.Duration],
    ) -> Optional[int]:
        if backup_retention is None:
            return None
        days = backup_retention.to_days(integral=False)
        if days != int(days) or not (
            constants.MIN_BACKUP_RETENTION_DAYS
            <= days
            <= constants.MAX_BACKUP_RETENTION_DAYS
        ):
            raise exceptions.configuration_error(
                f"backup retention period must be a whole number of days between "
                f"{constants.MIN_BACKUP_RETENTION_DAYS} and "
                f"{constants.MAX_BACKUP_RETENTION_DAYS}, got {days:g} days"
            )
        return int(days)

    @staticmethod
    def get_deletion_protection(
        deletion_protection: Optional[bool], removal_policy: aws_cdk.RemovalPolicy
    ) -> Optional[bool]:
        if deletion_protection is not None:
            return deletion_protection
        if removal_policy == aws_cdk.RemovalPolicy.RETAIN:
            return True
        return None
