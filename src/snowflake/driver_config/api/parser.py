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

"""Turn raw connection parameters into a validated ConnectionConfig."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, Dict, Optional

from snowflake.driver_config.api.authentication import build_authentication_config
from snowflake.driver_config.api.connection_string import (
    parse_connection_string_parameters,
)
from snowflake.driver_config.api.exceptions import ConfigurationInvalidError
from snowflake.driver_config.api.masking import mask_parameters
from snowflake.driver_config.api.models import ConnectionConfig
from snowflake.driver_config.api.parameters import (
    DATABASE_KEYS,
    QUERY_TIMEOUT_KEYS,
    find_first,
    get_first_value,
    get_required_value,
    is_known_parameter,
    merge_parameters,
)
from snowflake.driver_config.api.pool import build_pool_config
from snowflake.driver_config.api.utils.types import (
    Parameters,
    try_cast_to_bool,
    try_parse_int,
)
from snowflake.driver_config.api.validation import validate_config

log = logging.getLogger(__name__)


class ConnectionConfigParser:
    @classmethod
    def parse(
        cls,
        connection_params: Optional[Parameters] = None,
        default_params: Optional[Parameters] = None,
    ) -> ConnectionConfig:
        """
        Merge, build and validate a connection configuration.

        Args:
            connection_params: Parameters of this connection, they take precedence
            default_params: Defaults shared between connections

        Raises:
            MissingRequiredParameterError: account or user is missing
            UnsupportedAuthenticatorError: unknown authenticator alias
            InvalidDurationFormatError: malformed pool duration
            ConfigurationInvalidError: the built configuration breaks validation rules
        """
        params = merge_parameters(connection_params, default_params)
        log.debug("Parsing connection parameters: %s", mask_parameters(params))

        account = get_required_value(params, "account")
        user = get_required_value(params, "user")

        settings: Dict[str, Any] = dict(
            account=account,
            user=user,
            database=get_first_value(params, *DATABASE_KEYS),
            schema=get_first_value(params, "schema"),
            warehouse=get_first_value(params, "warehouse"),
            role=get_first_value(params, "role"),
            authentication=build_authentication_config(params),
        )

        key, raw_timeout = find_first(params, *QUERY_TIMEOUT_KEYS)
        timeout_seconds = try_parse_int(raw_timeout)
        if timeout_seconds is not None:
            settings["query_timeout"] = timedelta(seconds=timeout_seconds)
        elif raw_timeout is not None:
            log.debug("Ignoring invalid integer value of %s: %r", key, raw_timeout)

        raw_compression = get_first_value(params, "enable_compression")
        if raw_compression is not None:
            try:
                settings["enable_compression"] = try_cast_to_bool(raw_compression)
            except ValueError:
                log.debug(
                    "Ignoring non-boolean value of enable_compression: %r",
                    raw_compression,
                )

        settings["pool_config"] = build_pool_config(params)
        settings["additional_properties"] = {
            k: v for k, v in params.items() if not is_known_parameter(k)
        }

        config = ConnectionConfig(**settings)

        violations = validate_config(config)
        if violations:
            raise ConfigurationInvalidError(violations)

        log.debug(
            "Parsed connection configuration for account %s and user %s",
            config.account,
            config.user,
        )
        return config

    @classmethod
    def parse_connection_string(
        cls,
        connection_string: str,
        default_params: Optional[Parameters] = None,
    ) -> ConnectionConfig:
        params = parse_connection_string_parameters(connection_string)
        return cls.parse(params, default_params)


parse_parameters = ConnectionConfigParser.parse
parse_connection_string = ConnectionConfigParser.parse_connection_string
