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

from snowflake.driver_config.__about__ import VERSION
from snowflake.driver_config.api.exceptions import (
    ConfigurationInvalidError,
    DriverConfigError,
    InvalidConnectionStringError,
    InvalidDurationFormatError,
    MissingRequiredParameterError,
    UnsupportedAuthenticatorError,
)
from snowflake.driver_config.api.models import (
    AuthenticationConfig,
    AuthenticationType,
    ConnectionConfig,
    ConnectionPoolConfig,
    PoolOverflowPolicy,
    ValidationResult,
)
from snowflake.driver_config.api.parser import (
    ConnectionConfigParser,
    parse_connection_string,
    parse_parameters,
)

__version__ = VERSION

__all__ = [
    "AuthenticationConfig",
    "AuthenticationType",
    "ConfigurationInvalidError",
    "ConnectionConfig",
    "ConnectionConfigParser",
    "ConnectionPoolConfig",
    "DriverConfigError",
    "InvalidConnectionStringError",
    "InvalidDurationFormatError",
    "MissingRequiredParameterError",
    "PoolOverflowPolicy",
    "UnsupportedAuthenticatorError",
    "ValidationResult",
    "parse_connection_string",
    "parse_parameters",
]
