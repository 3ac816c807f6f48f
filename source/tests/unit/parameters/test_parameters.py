#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import dataclasses

import aws_cdk
import pytest

from aurora_snapshot.parameters.base import Attributes, Base, Setting
from aurora_snapshot.parameters.cluster import ClusterKey
from aurora_snapshot.parameters.common import CommonKey
from aurora_snapshot.parameters.credentials import CredentialsKey
from aurora_snapshot.parameters.parameters import (
    AllParameterGroups,
    SnapshotClusterParameters,
)


def test_parameters_are_generated() -> None:
    parameters = SnapshotClusterParameters(
        environment_name="dev", snapshot_identifier="my-snapshot"
    )
    parameters.generate(aws_cdk.Stack())

    assert parameters._generated
    assert parameters.get(CommonKey.SNAPSHOT_IDENTIFIER).default == "my-snapshot"
    assert parameters.get(CommonKey.ENVIRONMENT_NAME).default == "dev"


def test_parameters_generate_is_idempotent() -> None:
    parameters = SnapshotClusterParameters()
    stack = aws_cdk.Stack()

    parameters.generate(stack)
    parameters.generate(stack)

    assert len(parameters._parameters) == 2


def test_get_before_generate_fails() -> None:
    with pytest.raises(KeyError):
        SnapshotClusterParameters().get(CommonKey.SNAPSHOT_IDENTIFIER)


def test_settings_do_not_become_cfn_parameters() -> None:
    parameters = SnapshotClusterParameters(credentials_mode="generated")
    parameters.generate(aws_cdk.Stack())

    with pytest.raises(KeyError):
        parameters.get(CredentialsKey.MODE)


def test_parameters_can_be_passed_via_context() -> None:
    parameters = SnapshotClusterParameters(
        snapshot_identifier="my-snapshot",
        engine="aurora-postgresql",
        min_capacity=2,
        enable_data_api=True,
        credentials_mode="generated",
        master_username="admin",
        replica_regions=["eu-west-1", "ap-south-1"],
    )

    stack = aws_cdk.Stack()
    for key, value in parameters.to_context().items():
        stack.node.set_context(key, value)

    context_params = SnapshotClusterParameters.from_context(stack)

    assert context_params.snapshot_identifier == parameters.snapshot_identifier
    assert context_params.engine == parameters.engine
    assert context_params.min_capacity == 2
    assert context_params.enable_data_api is True
    assert context_params.credentials_mode == "generated"
    assert context_params.master_username == "admin"
    assert context_params.replica_regions == ["eu-west-1", "ap-south-1"]
    assert context_params.environment_name is None


def test_context_keys_match_parameter_and_setting_ids() -> None:
    context = SnapshotClusterParameters(
        snapshot_identifier="my-snapshot", max_capacity=8
    ).to_context()

    assert context[CommonKey.SNAPSHOT_IDENTIFIER.value] == '"my-snapshot"'
    assert context[ClusterKey.MAX_CAPACITY.value] == "8"
    assert context[ClusterKey.ENGINE.value] == '"aurora-mysql"'
    assert ClusterKey.MIN_CAPACITY.value not in context


def test_parameter_list_default_set_correctly() -> None:
    @dataclasses.dataclass
    class TestParameters(Base):
        subnets: list[str] = Base.parameter(
            Attributes(id=CommonKey.ENVIRONMENT_NAME, type="CommaDelimitedList")
        )

    parameters = TestParameters(subnets=["a", "b"])
    parameters.generate(aws_cdk.Stack())

    assert parameters.get(CommonKey.ENVIRONMENT_NAME).default == "a,b"


def test_fields_only_includes_base_parameters() -> None:
    @dataclasses.dataclass
    class TestParameters(Base):
        name: str = Base.parameter(Attributes(id=CommonKey.ENVIRONMENT_NAME))
        engine: str = Base.setting(Setting(id=ClusterKey.ENGINE), default="aurora")
        other: str = "not defined as a base parameter"

    fields = list(TestParameters._fields())
    assert len(fields) == 1
    field, attributes = fields[0]
    assert field.name == "name"
    assert attributes.id == CommonKey.ENVIRONMENT_NAME

    settings = list(TestParameters._settings())
    assert len(settings) == 1
    field, setting = settings[0]
    assert field.name == "engine"
    assert setting.id == ClusterKey.ENGINE


def test_parameter_groups_list_every_parameter() -> None:
    groups = AllParameterGroups.template_metadata()["AWS::CloudFormation::Interface"][
        "ParameterGroups"
    ]
    grouped = {key for group in groups for key in group["Parameters"]}

    assert grouped == {
        attributes.id for _, attributes in SnapshotClusterParameters._fields()
    }
