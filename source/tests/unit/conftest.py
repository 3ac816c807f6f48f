#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import aws_cdk
import pytest
from aws_cdk import aws_ec2 as ec2

ACCOUNT = "12345"
REGION = "us-test-1"


@pytest.fixture
def app() -> aws_cdk.App:
    return aws_cdk.App()


@pytest.fixture
def stack(app: aws_cdk.App) -> aws_cdk.Stack:
    stack = aws_cdk.Stack(
        app,
        "TestStack",
        env=aws_cdk.Environment(account=ACCOUNT, region=REGION),
    )
    stack.node.set_context(
        f"availability-zones:account={ACCOUNT}:region={REGION}", [f"{REGION}a", f"{REGION}b"]
    )
    return stack


@pytest.fixture
def vpc(stack: aws_cdk.Stack) -> ec2.Vpc:
    return ec2.Vpc(stack, "VPC")


@pytest.fixture
def snapshot_identifier() -> str:
    return "my-snapshot"
