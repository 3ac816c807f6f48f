#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0

DISTRIBUTION_NAME = "aurora-snapshot"
STACK_NAME = "AuroraServerlessFromSnapshot"
CLUSTER_CONSTRUCT_ID = "ServerlessDatabase"

TAG_ENVIRONMENT_NAME = "aurora-snapshot:EnvironmentName"
TAG_MODULE_NAME = "aurora-snapshot:ModuleName"
MODULE_DATABASE = "database"

ENGINE_MODE_SERVERLESS = "serverless"
CLUSTER_RESOURCE_TYPE = "AWS::RDS::DBCluster"
SECURITY_GROUP_DESCRIPTION = "RDS security group"
MIN_CLUSTER_SUBNETS = 2
MIN_BACKUP_RETENTION_DAYS = 1
MAX_BACKUP_RETENTION_DAYS = 35
MIN_AUTO_PAUSE_SECONDS = 5 * 60
MAX_AUTO_PAUSE_SECONDS = 24 * 60 * 60

# generated master credentials
DEFAULT_SECRET_ID = "Secret"
GENERATED_SECRET_DESCRIPTION_PREFIX = "Generated by the CDK for stack: "
SECRET_USERNAME_KEY = "username"
SECRET_PASSWORD_KEY = "password"
SECRET_PASSWORD_LENGTH = 30
