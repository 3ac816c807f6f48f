#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import json
import shlex
from typing import Dict

from tasks import devkit
from tasks.cdk import _build_context


def parse_context(cmd: str) -> Dict[str, str]:
    args = shlex.split(cmd)
    context = {}
    for flag, pair in zip(args[::2], args[1::2]):
        assert flag == "--context"
        key, _, value = pair.partition("=")
        context[key] = value
    return context


def test_context_args_survive_the_shell() -> None:
    args = devkit.utils.to_context_args(
        {"SnapshotIdentifier": json.dumps("my-snap")}
    )

    assert shlex.split(" ".join(args)) == [
        "--context",
        'SnapshotIdentifier="my-snap"',
    ]


def test_context_values_with_spaces_and_quotes_survive_the_shell() -> None:
    value = json.dumps("it's a \"snapshot\" $HOME")
    cmd = " ".join(devkit.utils.to_context_args({"SnapshotIdentifier": value}))

    assert json.loads(parse_context(cmd)["SnapshotIdentifier"]) == (
        "it's a \"snapshot\" $HOME"
    )


def test_build_context_values_are_json_through_the_command() -> None:
    context = _build_context(
        environment_name="dev",
        snapshot_identifier="my-snap",
        engine="aurora-mysql",
        credentials_mode="generated",
        master_username="admin",
        secret_arn=None,
        nag=True,
    )
    cmd = " ".join(devkit.utils.to_context_args(context))
    parsed = parse_context(cmd)

    assert parsed["enable_nag_scan"] == "true"
    assert "SecretArn" not in parsed
    assert {
        key: json.loads(value)
        for key, value in parsed.items()
        if key != "enable_nag_scan"
    } == {
        "EnvironmentName": "dev",
        "SnapshotIdentifier": "my-snap",
        "Engine": "aurora-mysql",
        "CredentialsMode": "generated",
        "MasterUsername": "admin",
    }


def test_build_context_disables_nag_scan() -> None:
    context = _build_context(
        environment_name=None,
        snapshot_identifier=None,
        engine=None,
        credentials_mode=None,
        master_username=None,
        secret_arn=None,
        nag=False,
    )

    assert context == {"enable_nag_scan": "false"}
