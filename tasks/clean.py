#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
#  Licensed under the Apache License, Version 2.0 (the "License"). You may not use this file except in compliance
#  with the License. A copy of the License is located at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  or in the 'license' file accompanying this file. This file is distributed on an 'AS IS' BASIS, WITHOUT WARRANTIES
#  OR CONDITIONS OF ANY KIND, express or implied. See the License for the specific language governing permissions
#  and limitations under the License.

import tasks.devkit as devkit

from invoke import task, Context
import glob
import os
import shutil


def _delete(path: str):
    if os.path.isdir(path):
        devkit.console.print(f'deleting {path} ...')
        shutil.rmtree(path, ignore_errors=True)
    elif os.path.isfile(path):
        devkit.console.print(f'deleting {path} ...')
        os.remove(path)


@task
def build(c):
    # type: (Context) -> None
    """
    clean build and dist directories
    """
    devkit.console.print_header_block('clean build')
    _delete(devkit.props.project_build_dir)
    _delete(devkit.props.project_dist_dir)
    for egg_info in glob.glob(os.path.join(devkit.props.project_source_dir, '*.egg-info')):
        _delete(egg_info)


@task
def cdk(c):
    # type: (Context) -> None
    """
    clean cdk.out
    """
    devkit.console.print_header_block('clean cdk.out')
    _delete(devkit.props.cdk_out_dir)


@task
def tests(c):
    # type: (Context) -> None
    """
    clean test and coverage caches
    """
    devkit.console.print_header_block('clean test caches')
    _delete(os.path.join(devkit.props.project_source_dir, '.pytest_cache'))
    _delete(os.path.join(devkit.props.project_source_dir, '.coverage'))
    _delete(os.path.join(devkit.props.project_source_dir, 'htmlcov'))


@task(name='all', default=True)
def clean_all(c):
    # type: (Context) -> None
    """
    clean all build outputs
    """
    devkit.console.print_header_block('begin: clean all', style='main')

    build(c)

    cdk(c)

    tests(c)

    devkit.console.print_header_block('end: clean all', style='main')
