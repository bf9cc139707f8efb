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
from typing import Any, Dict

from snowflake.driver_config.api.durations import parse_duration
from snowflake.driver_config.api.models import ConnectionPoolConfig
from snowflake.driver_config.api.parameters import (
    IDLE_TIMEOUT_KEYS,
    MAX_LIFETIME_KEYS,
    MAX_POOL_SIZE_KEYS,
    MIN_POOL_SIZE_KEYS,
    POOL_ENABLED_KEYS,
    find_first,
)
from snowflake.driver_config.api.utils.types import (
    Parameters,
    try_cast_to_bool,
    try_parse_int,
)

log = logging.getLogger(__name__)


def build_pool_config(params: Parameters) -> ConnectionPoolConfig:
    """
    Read pool sizing and timeouts. Integer and boolean keys that do not parse
    keep their defaults; duration keys that do not parse raise
    InvalidDurationFormatError.
    """
    settings: Dict[str, Any] = {}

    for attribute, keys in (
        ("max_pool_size", MAX_POOL_SIZE_KEYS),
        ("min_pool_size", MIN_POOL_SIZE_KEYS),
    ):
        key, raw = find_first(params, *keys)
        if raw is None:
            continue
        number = try_parse_int(raw)
        if number is None:
            log.debug("Ignoring invalid integer value of %s: %r", key, raw)
        else:
            settings[attribute] = number

    key, raw = find_first(params, *POOL_ENABLED_KEYS)
    if raw is not None:
        try:
            settings["enabled"] = try_cast_to_bool(raw)
        except ValueError:
            log.debug("Ignoring non-boolean value of %s: %r", key, raw)

    for attribute, keys in (
        ("idle_timeout", IDLE_TIMEOUT_KEYS),
        ("max_connection_lifetime", MAX_LIFETIME_KEYS),
    ):
        key, raw = find_first(params, *keys)
        if raw is not None:
            settings[attribute] = parse_duration(raw, parameter_name=key)

    return ConnectionPoolConfig(**settings)

