#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import json

import aws_cdk
from aws_cdk import Aspects
from aws_cdk.assertions import Template

from aurora_snapshot import constants
from aurora_snapshot.app import build


def test_build_reads_parameters_from_context() -> None:
    app = aws_cdk.App(
        context={
            "enable_nag_scan": "false",
            "EnvironmentName": json.dumps("prod"),
            "SnapshotIdentifier": json.dumps("my-snapshot"),
            "CredentialsMode": json.dumps("generated"),
            "MasterUsername": json.dumps("admin"),
        }
    )

    stack = build(app)

    assert stack.stack_name == constants.STACK_NAME
    assert stack.parameters.master_username == "admin"
    template = Template.from_stack(stack)
    template.has_parameter("SnapshotIdentifier", {"Default": "my-snapshot"})
    template.has_parameter("EnvironmentName", {"Default": "prod"})
    template.resource_count_is("AWS::SecretsManager::Secret", 1)
    assert "Rules" not in template.to_json()
    assert len(Aspects.of(app).all) == 0


def test_build_uses_stack_name_from_context() -> None:
    app = aws_cdk.App(
        context={"enable_nag_scan": "false", "stack_name": "RestoredDatabase"}
    )

    stack = build(app)

    assert stack.stack_name == "RestoredDatabase"


def test_build_enables_nag_scan_by_default() -> None:
    app = aws_cdk.App()

    build(app)

    assert len(Aspects.of(app).all) == 1
