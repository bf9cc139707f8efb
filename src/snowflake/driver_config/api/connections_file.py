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

"""Read named connection parameters from a TOML connections file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import tomlkit
from snowflake.driver_config.api.exceptions import (
    InvalidConnectionConfigurationError,
    MissingConfigurationError,
)
from snowflake.driver_config.api.utils.types import ParametersDict
from tomlkit.exceptions import TOMLKitError

log = logging.getLogger(__name__)

CONNECTIONS_SECTION = "connections"


def _read_connections_section(path: Path) -> Dict[str, Any]:
    path = Path(path).expanduser()
    if not path.exists():
        raise MissingConfigurationError(f"Connections file {path} does not exist")

    try:
        document = tomlkit.loads(path.read_text()).unwrap()
    except TOMLKitError as exception:
        raise InvalidConnectionConfigurationError(path, str(exception))

    section = document.get(CONNECTIONS_SECTION, {})
    if not isinstance(section, dict):
        raise InvalidConnectionConfigurationError(
            path, f"[{CONNECTIONS_SECTION}] must be a table."
        )
    return section


def list_connection_names(path: Path) -> List[str]:
    return [
        name
        for name, value in _read_connections_section(path).items()
        if isinstance(value, dict)
    ]


def load_connection_parameters(path: Path, connection_name: str) -> ParametersDict:
    """
    Returns parameters of [connections.<connection_name>] as strings.

    Example:
        Input:
            [connections.dev]
            account = "acme"
            max_pool_size = 20
            enable_compression = false

        Output:
            {"account": "acme", "max_pool_size": "20", "enable_compression": "false"}
    """
    connections = _read_connections_section(path)
    connection = connections.get(connection_name)
    if not isinstance(connection, dict):
        raise MissingConfigurationError(
            f"Connection {connection_name} is not configured"
        )

    log.debug("Loaded connection %s from %s", connection_name, path)
    return {
        key: _to_parameter_value(value)
        for key, value in connection.items()
        if value is not None
    }


def _to_parameter_value(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)
