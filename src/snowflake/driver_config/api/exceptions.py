# Copyright (c) 2024 Snowflake Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from click.exceptions import ClickException

if TYPE_CHECKING:
    from snowflake.driver_config.api.models import ValidationResult


class DriverConfigError(ClickException):
    """Base error of connection configuration parsing.

    0 Configuration is valid.
    1 Configuration was read but is not usable.
    2 Connection parameters are malformed or incomplete.
    """

    exit_code = 1


class ConfigArgumentError(DriverConfigError):
    exit_code = 2


class MissingRequiredParameterError(ConfigArgumentError):
    def __init__(self, parameter_name: str):
        self.parameter_name = parameter_name
        super().__init__(f"Required parameter '{parameter_name}' is missing or empty.")


class UnsupportedAuthenticatorError(ConfigArgumentError):
    def __init__(self, authenticator: str):
        self.authenticator = authenticator
        super().__init__(f"Unsupported authenticator: {authenticator}")


class InvalidDurationFormatError(ConfigArgumentError):
    def __init__(self, value: str, parameter_name: Optional[str] = None):
        self.value = value
        self.parameter_name = parameter_name
        message = (
            f"Invalid duration format: '{value}'. "
            "Expected whole seconds or a number followed by one of s, m, h."
        )
        if parameter_name:
            message = f"Parameter '{parameter_name}': {message}"
        super().__init__(message)


class InvalidConnectionStringError(ConfigArgumentError):
    def format_message(self):
        return f"Invalid connection string. {self.message}"


class ConfigurationInvalidError(DriverConfigError):
    def __init__(self, violations: List[ValidationResult]):
        self.violations = list(violations)
        super().__init__(
            "Configuration validation failed: "
            + "; ".join(v.message for v in self.violations)
        )


class MissingConfigurationError(DriverConfigError):
    pass


class InvalidConnectionConfigurationError(DriverConfigError):
    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid connection configuration in {path}. {reason}")
