#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0

import aurora_snapshot_meta
from setuptools import find_packages, setup

setup(
    name=aurora_snapshot_meta.__name__,
    version=aurora_snapshot_meta.__version__,
    description="Aurora Serverless clusters restored from DB cluster snapshots",
    url="https://aws.amazon.com/rds/aurora/serverless/",
    author="Amazon",
    license="Apache License, Version 2.0",
    packages=find_packages(where="source", exclude=["tests", "tests.*"]),
    package_dir={"": "source"},
    python_requires=">=3.9",
    install_requires=[
        "aws-cdk-lib>=2.100.0,<3.0.0",
        "constructs>=10.0.0,<11.0.0",
        "cdk-nag>=2.27.0,<3.0.0",
        "pydantic>=1.10",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
            "invoke",
            "rich",
        ],
        "dev": [
            "invoke",
            "rich",
        ],
    },
    entry_points="""
        [console_scripts]
        aurora-snapshot-synth=aurora_snapshot.app:main
    """,
)
