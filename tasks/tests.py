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
import invoke.exceptions
import os
from typing import List


def _run_unit_tests(c: Context,
                    params: List[str],
                    capture_output: bool = False,
                    keywords=None,
                    cov_report=None) -> int:
    test_params = []
    if params is not None:
        for param in params:
            kv = param.split('=')
            key = kv[0]
            value = None
            if len(kv) > 1:
                value = kv[1]
            test_params += [f'--{key}']
            if value is not None:
                test_params += [value]

    devkit.console.print_header_block('executing unit tests for: aurora-snapshot')

    with c.cd(devkit.props.project_source_dir):
        cmd = f'pytest -v --disable-warnings {" ".join(test_params)} {devkit.props.project_unit_tests_dir}'
        if capture_output:
            cmd = f'{cmd} --capture=tee-sys'
        if keywords is not None:
            cmd = f'{cmd} -k "{keywords}"'
        if cov_report is not None and cov_report in ('term', 'term-missing', 'annotate', 'html', 'xml', 'lcov'):
            cmd = f'{cmd} --cov aurora_snapshot --cov-report {cov_report}'
        devkit.console.info(f'> {cmd}')

        try:
            result = c.run(cmd, env={
                'PYTHONPATH': os.pathsep.join([devkit.props.project_root_dir, devkit.props.project_source_dir])
            })
            return result.exited
        except invoke.exceptions.UnexpectedExit as e:
            return e.result.exited


@task(name='unit', iterable=['params'], default=True)
def unit(c, keywords=None, params=None, capture_output=False, cov_report=None):
    # type: (Context, str, List[str], bool, str) -> None
    """
    run unit tests
    """
    exit_code = _run_unit_tests(
        c=c,
        params=params,
        capture_output=capture_output,
        keywords=keywords,
        cov_report=cov_report
    )
    raise SystemExit(exit_code)
