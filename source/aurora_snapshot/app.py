#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import logging
import os

import aws_cdk as cdk
from aws_cdk import Aspects
from cdk_nag import AwsSolutionsChecks

from aurora_snapshot.constants import STACK_NAME
from aurora_snapshot.parameters.parameters import SnapshotClusterParameters
from aurora_snapshot.stack import SnapshotClusterStack

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def build(app: cdk.App) -> SnapshotClusterStack:
    """
    Add the snapshot cluster stack to the app, reading parameters and
    settings from the app context.
    """
    synthesizer = cdk.DefaultStackSynthesizer(generate_bootstrap_version_rule=False)

    enable_nag_scan = app.node.try_get_context("enable_nag_scan")
    is_nag_scan_enabled = not (
        enable_nag_scan and str(enable_nag_scan).lower() == "false"
    )
    if is_nag_scan_enabled:
        Aspects.of(app).add(AwsSolutionsChecks())

    stack_name = app.node.try_get_context("stack_name") or STACK_NAME

    return SnapshotClusterStack(
        app,
        stack_name,
        parameters=SnapshotClusterParameters.from_context(app),
        synthesizer=synthesizer,
    )


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(), format=LOG_FORMAT
    )
    app = cdk.App()
    build(app)
    app.synth()


if __name__ == "__main__":
    main()
