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

"""
Aurora Snapshot Development Task Utils

Should not import the aurora_snapshot package!
"""

from typing import Dict, List
import os
import shlex
import sys
from pathlib import Path
from rich.console import Console
from rich.style import Style as RichStyle
import textwrap

DEVELOPMENT_ERROR = 'DEVELOPMENT_ERROR'
ERROR_CODE_VENV_NOT_SETUP = 'ERROR_CODE_VENV_NOT_SETUP'
INVALID_PARAMS = 'INVALID_PARAMS'


class DevelopmentProps:

    @property
    def project_root_dir(self) -> str:
        path = Path(os.path.dirname(os.path.realpath(__file__)))
        return str(path.parent.absolute())

    @property
    def project_source_dir(self) -> str:
        return os.path.join(self.project_root_dir, 'source')

    @property
    def project_unit_tests_dir(self) -> str:
        return os.path.join(self.project_source_dir, 'tests', 'unit')

    @property
    def project_build_dir(self) -> str:
        return os.path.join(self.project_root_dir, 'build')

    @property
    def project_dist_dir(self) -> str:
        return os.path.join(self.project_root_dir, 'dist')

    @property
    def cdk_out_dir(self) -> str:
        return os.path.join(self.project_root_dir, 'cdk.out')


class DevelopmentConsole:

    def __init__(self):
        self.console = Console()

    def error(self, msg):
        self.console.print(msg, style='bold red')

    def info(self, msg):
        self.console.print(msg, style='cyan')

    def warning(self, msg):
        self.console.print(msg, style='bold yellow')

    def success(self, msg):
        self.console.print(msg, style='bold green')

    def print(self, msg):
        self.console.print(msg)

    def spinner(self, message: str):
        return self.console.status(message)

    def print_header_block(self, content: str, width: int = 120, break_long_words: bool = False, style=None):
        if style == 'main':
            style = RichStyle(bold=True, color='bright_white')
        elif style == 'success':
            style = 'bold green'
        elif style == 'error':
            style = 'bold red'
        else:
            style = None

        self.console.print('-' * width, style=style)
        lines = textwrap.wrap(f'* {content}', width, break_on_hyphens=False, break_long_words=break_long_words, subsequent_indent='  ')
        for line in lines:
            self.console.print(line, style=style)
        self.console.print('-' * width, style=style)


class DevelopmentException(Exception):
    def __init__(self, message: str, error_code: str = DEVELOPMENT_ERROR, ref=None):
        self.error_code = error_code
        self.message = message
        self.ref = ref

    def __repr__(self):
        return str(self)

    def __str__(self):
        return f'[{self.error_code}] {self.message}'


class DevelopmentExceptions:

    @staticmethod
    def virtual_env_not_setup():
        return DevelopmentException(
            error_code=ERROR_CODE_VENV_NOT_SETUP,
            message='VirtualEnv is not setup. Please setup a python virtual environment before proceeding.'
        )

    @staticmethod
    def invalid_params(message: str):
        return DevelopmentException(
            error_code=INVALID_PARAMS,
            message=message
        )


props = DevelopmentProps()


class DevelopmentUtils:

    @staticmethod
    def get_base_prefix_compat() -> str:
        """
        Get base/real prefix, or sys.prefix if there is none.
        """
        return getattr(sys, 'base_prefix', None) or getattr(sys, 'real_prefix', None) or sys.prefix

    def in_virtualenv(self) -> bool:
        return self.get_base_prefix_compat() != sys.prefix

    def check_venv(self):
        if self.in_virtualenv():
            return
        raise exceptions.virtual_env_not_setup()

    @staticmethod
    def to_context_args(context: Dict[str, str]) -> List[str]:
        args = []
        for key, value in context.items():
            args += ['--context', shlex.quote(f'{key}={value}')]
        return args


console = DevelopmentConsole()
exceptions = DevelopmentExceptions()
utils = DevelopmentUtils()
