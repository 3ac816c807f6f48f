#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import re
from typing import Optional

import aws_cdk
import pytest
from aws_cdk import aws_secretsmanager as secretsmanager
from aws_cdk.assertions import Match, Template

from aurora_snapshot.exceptions import ConfigurationError
from aurora_snapshot.secret import DatabaseSecret
from tests.unit import util

# md5 of "{}", the criteria of a secret without excluded characters
EMPTY_CRITERIA_DIGEST = "99914b932bd37a50b983c5e7c90ae93b"


def secret_logical_id(
    username: str = "admin",
    exclude_characters: Optional[str] = None,
    replace: bool = True,
) -> str:
    stack = aws_cdk.Stack(aws_cdk.App(), "TestStack")
    DatabaseSecret(
        stack,
        "Secret",
        username=username,
        exclude_characters=exclude_characters,
        replace_on_password_criteria_changes=replace,
    )
    return util.get_logical_id(stack, ["Secret"])


def test_secret_string_template_is_compact_json() -> None:
    assert DatabaseSecret.build_secret_string_template("admin") == '{"username":"admin"}'


def test_secret_generates_password_key(stack: aws_cdk.Stack) -> None:
    secret = DatabaseSecret(stack, "Secret", username="admin", secret_name="db-master")

    assert isinstance(secret, secretsmanager.Secret)
    Template.from_stack(stack).has_resource_properties(
        "AWS::SecretsManager::Secret",
        {
            "Name": "db-master",
            "Description": {
                "Fn::Join": [
                    "",
                    ["Generated by the CDK for stack: ", {"Ref": "AWS::StackName"}],
                ]
            },
            "GenerateSecretString": {
                "GenerateStringKey": "password",
                "PasswordLength": 30,
                "SecretStringTemplate": '{"username":"admin"}',
            },
        },
    )


def test_secret_requires_username(stack: aws_cdk.Stack) -> None:
    with pytest.raises(ConfigurationError, match="username"):
        DatabaseSecret(stack, "Secret", username="")

    Template.from_stack(stack).resource_count_is("AWS::SecretsManager::Secret", 0)


def test_secret_rotation_finding_is_suppressed(stack: aws_cdk.Stack) -> None:
    DatabaseSecret(stack, "Secret", username="admin")

    Template.from_stack(stack).has_resource(
        "AWS::SecretsManager::Secret",
        {
            "Metadata": {
                "cdk_nag": {
                    "rules_to_suppress": Match.array_with(
                        [Match.object_like({"id": "AwsSolutions-SMG4"})]
                    )
                }
            }
        },
    )


def test_logical_id_is_kept_without_replace_on_criteria_changes() -> None:
    logical_id = secret_logical_id(replace=False)

    assert re.fullmatch(r"Secret[0-9A-F]{8}", logical_id)


def test_logical_id_is_unique_id_with_password_criteria_digest(
    stack: aws_cdk.Stack,
) -> None:
    secret = DatabaseSecret(
        stack, "Secret", username="admin", replace_on_password_criteria_changes=True
    )

    assert (
        util.get_logical_id(stack, ["Secret"])
        == f"{aws_cdk.Names.unique_id(secret)}{EMPTY_CRITERIA_DIGEST}"
    )


def test_logical_id_is_stable_for_same_criteria() -> None:
    assert secret_logical_id(exclude_characters="@") == secret_logical_id(
        exclude_characters="@"
    )


def test_logical_id_changes_with_excluded_characters() -> None:
    assert secret_logical_id() != secret_logical_id(exclude_characters="@")
    assert secret_logical_id(exclude_characters="@") != secret_logical_id(
        exclude_characters="@/"
    )


def test_logical_id_ignores_username() -> None:
    assert secret_logical_id() == secret_logical_id(username="other")
