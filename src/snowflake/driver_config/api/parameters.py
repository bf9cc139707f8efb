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

"""Case-insensitive connection parameter merging and key lookup."""

from __future__ import annotations

from typing import Optional, Tuple

from requests.structures import CaseInsensitiveDict
from snowflake.driver_config.api.exceptions import MissingRequiredParameterError
from snowflake.driver_config.api.utils.types import Parameters

SSO_PREFIX = "sso_"

# Ordered candidate keys. The first present, non-blank key wins.
DATABASE_KEYS: Tuple[str, ...] = ("db", "database")
PRIVATE_KEY_PATH_KEYS: Tuple[str, ...] = ("private_key_file", "private_key_path")
PRIVATE_KEY_PASSPHRASE_KEYS: Tuple[str, ...] = (
    "private_key_pwd",
    "private_key_passphrase",
)
OAUTH_TOKEN_KEYS: Tuple[str, ...] = ("token", "oauth_token")
QUERY_TIMEOUT_KEYS: Tuple[str, ...] = ("connection_timeout", "query_timeout")
MAX_POOL_SIZE_KEYS: Tuple[str, ...] = ("maxpoolsize", "max_pool_size")
MIN_POOL_SIZE_KEYS: Tuple[str, ...] = ("minpoolsize", "min_pool_size")
POOL_ENABLED_KEYS: Tuple[str, ...] = ("poolingenabled", "pool_enabled")
IDLE_TIMEOUT_KEYS: Tuple[str, ...] = (
    "waitingforidlesessiontimeout",
    "pool_idle_timeout",
)
MAX_LIFETIME_KEYS: Tuple[str, ...] = ("expirationtimeout", "pool_max_lifetime")

KNOWN_PARAMETERS = frozenset(
    (
        "account",
        "user",
        "schema",
        "warehouse",
        "role",
        "authenticator",
        "password",
        "oauth_refresh_token",
        "enable_compression",
        *DATABASE_KEYS,
        *PRIVATE_KEY_PATH_KEYS,
        *PRIVATE_KEY_PASSPHRASE_KEYS,
        *OAUTH_TOKEN_KEYS,
        *QUERY_TIMEOUT_KEYS,
        *MAX_POOL_SIZE_KEYS,
        *MIN_POOL_SIZE_KEYS,
        *POOL_ENABLED_KEYS,
        *IDLE_TIMEOUT_KEYS,
        *MAX_LIFETIME_KEYS,
    )
)


def merge_parameters(
    connection_params: Optional[Parameters] = None,
    default_params: Optional[Parameters] = None,
) -> CaseInsensitiveDict:
    """
    Merge connection-scoped parameters over default-scoped ones.

    Keys are compared case-insensitively and connection-scoped values win.
    Neither input is modified.

    Example:
        connection_params = {"a": "1"}
        default_params = {"A": "2", "b": "3"}
        result = {"a": "1", "b": "3"}
    """
    merged: CaseInsensitiveDict = CaseInsensitiveDict()
    if default_params:
        merged.update(default_params)
    if connection_params:
        merged.update(connection_params)
    return merged


def find_first(
    params: Parameters, *keys: str
) -> Tuple[Optional[str], Optional[str]]:
    """Return the first candidate key carrying a non-blank value, with that value."""
    for key in keys:
        value = params.get(key)
        if value is not None and value.strip():
            return key, value
    return None, None


def get_first_value(params: Parameters, *keys: str) -> Optional[str]:
    return find_first(params, *keys)[1]


def get_required_value(params: Parameters, key: str) -> str:
    value = get_first_value(params, key)
    if value is None:
        raise MissingRequiredParameterError(key)
    return value.strip()


def is_known_parameter(key: str) -> bool:
    key = key.lower()
    return key in KNOWN_PARAMETERS or key.startswith(SSO_PREFIX)
