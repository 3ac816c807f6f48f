#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from typing import Any, Optional

from aurora_snapshot import errorcodes


class AuroraSnapshotException(Exception):
    def __init__(
        self,
        error_code: str,
        message: Optional[str] = None,
        exc: Optional[BaseException] = None,
        ref: Any = None,
    ) -> None:
        super().__init__(message)
        self._error_code = error_code
        self._message = message
        self._exc = exc
        self._ref = ref

    def __repr__(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    @property
    def error_code(self) -> str:
        if self._error_code:
            return self._error_code
        return errorcodes.GENERAL_ERROR

    @property
    def message(self) -> str:
        message = []
        if self._message:
            message.append(self._message)
        if self._exc:
            message.append(f"Err: {self._exc}")
        return ", ".join(message)

    @property
    def exception(self) -> Optional[BaseException]:
        return self._exc

    @property
    def ref(self) -> Any:
        return self._ref


class ConfigurationError(AuroraSnapshotException):
    """
    Raised synchronously at synthesis time when the requested cluster
    configuration is invalid. The caller must fix the input and re-invoke.
    """

    def __init__(
        self,
        message: str,
        error_code: str = errorcodes.CONFIGURATION_ERROR,
        exc: Optional[BaseException] = None,
        ref: Any = None,
    ) -> None:
        super().__init__(error_code=error_code, message=message, exc=exc, ref=ref)


def configuration_error(message: str, ref: Any = None) -> ConfigurationError:
    return ConfigurationError(message=message, ref=ref)


def invalid_params(
    message: str, exc: Optional[BaseException] = None
) -> ConfigurationError:
    return ConfigurationError(
        message=message, error_code=errorcodes.INVALID_PARAMS, exc=exc
    )
