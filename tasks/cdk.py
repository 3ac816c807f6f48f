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
import json
import os
from typing import Dict, List, Optional


def _build_context(environment_name: Optional[str],
                   snapshot_identifier: Optional[str],
                   engine: Optional[str],
                   credentials_mode: Optional[str],
                   master_username: Optional[str],
                   secret_arn: Optional[str],
                   nag: bool) -> Dict[str, str]:
    context = {
        'enable_nag_scan': 'true' if nag else 'false'
    }
    values = {
        'EnvironmentName': environment_name,
        'SnapshotIdentifier': snapshot_identifier,
        'Engine': engine,
        'CredentialsMode': credentials_mode,
        'MasterUsername': master_username,
        'SecretArn': secret_arn
    }
    for key, value in values.items():
        if value is not None:
            context[key] = json.dumps(value)
    return context


@task(iterable=['replica_regions'])
def synth(c, snapshot_identifier=None, environment_name=None, engine=None, credentials_mode=None,
          master_username=None, secret_arn=None, replica_regions=None, nag=True):
    # type: (Context, str, str, str, str, str, str, List[str], bool) -> None
    """
    synthesize the snapshot cluster stack into cdk.out
    """
    devkit.utils.check_venv()

    if credentials_mode == 'generated' and not master_username:
        raise devkit.exceptions.invalid_params('master-username is required when credentials-mode is generated')

    context = _build_context(
        environment_name=environment_name,
        snapshot_identifier=snapshot_identifier,
        engine=engine,
        credentials_mode=credentials_mode,
        master_username=master_username,
        secret_arn=secret_arn,
        nag=nag
    )
    if replica_regions:
        context['ReplicaRegions'] = json.dumps(replica_regions)

    devkit.console.print_header_block('cdk synth: aurora-snapshot', style='main')
    cmd = ' '.join(['cdk', 'synth', '--output', devkit.props.cdk_out_dir] + devkit.utils.to_context_args(context))
    devkit.console.info(f'> {cmd}')

    with c.cd(devkit.props.project_root_dir):
        try:
            c.run(cmd, env={
                'PYTHONPATH': devkit.props.project_source_dir
            })
        except invoke.exceptions.UnexpectedExit as e:
            devkit.console.error('cdk synth failed.')
            raise SystemExit(e.result.exited)

    if nag:
        report_files = [file for file in os.listdir(devkit.props.cdk_out_dir) if file.endswith('NagReport.csv')]
        for report_file in report_files:
            devkit.console.success(f'cdk_nag report: {os.path.join(devkit.props.cdk_out_dir, report_file)}')
    devkit.console.success('cdk synth succeeded.')
