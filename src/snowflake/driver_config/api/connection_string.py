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

import logging
import os
from typing import Optional

from requests.structures import CaseInsensitiveDict
from snowflake.driver_config.api.exceptions import InvalidConnectionStringError

log = logging.getLogger(__name__)

PAIR_SEPARATOR = ";"
KEY_VALUE_SEPARATOR = "="


def parse_connection_string_parameters(
    connection_string: Optional[str],
) -> CaseInsensitiveDict:
    """
    Split a connection string into its parameters.

    Example:
        Input:  "account=acme;user=bob;password=${ACME_PASSWORD}"
        Output: {"account": "acme", "user": "bob", "password": <$ACME_PASSWORD>}
    """
    if connection_string is None or not connection_string.strip():
        raise InvalidConnectionStringError(
            "Connection string cannot be null or empty."
        )

    parameters: CaseInsensitiveDict = CaseInsensitiveDict()
    for pair in connection_string.split(PAIR_SEPARATOR):
        if not pair.strip():
            continue
        key, separator, value = pair.partition(KEY_VALUE_SEPARATOR)
        key, value = key.strip(), value.strip()
        if not separator or not key or not value:
            raise InvalidConnectionStringError(
                f"Invalid connection string parameter: '{pair.strip()}'"
            )
        parameters[key] = expand_environment_variable(value)

    return parameters


def expand_environment_variable(value: str) -> str:
    """Replace a whole-value ${NAME} reference with the environment variable."""
    if not (value.startswith("${") and value.endswith("}")):
        return value

    variable_name = value[2:-1]
    env_value = os.environ.get(variable_name)
    if env_value is None:
        log.debug("Environment variable %s is not set, keeping value", variable_name)
        return value
    return env_value
