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

"""Utilities for masking sensitive connection parameter values."""

from __future__ import annotations

from typing import Any, Dict, Final, Mapping, Tuple

MASKED_VALUE: Final[str] = "****"

SENSITIVE_KEYS: Final[Tuple[str, ...]] = (
    "password",
    "pwd",
    "token",
    "private_key",
    "passphrase",
    "secret",
)

PATH_KEYS: Final[Tuple[str, ...]] = (
    "private_key_file",
    "private_key_path",
)


def should_mask_value(key: str) -> bool:
    """
    Determine if the value associated with the key is sensitive.

    Keys naming a key file are not masked because they refer to file
    locations rather than secrets.
    """
    key_lower = key.lower()

    if any(path_fragment in key_lower for path_fragment in PATH_KEYS):
        return False

    return any(fragment in key_lower for fragment in SENSITIVE_KEYS)


def mask_sensitive_value(key: str, value: Any) -> Any:
    """Mask sensitive values; otherwise return the original value."""
    if value is not None and should_mask_value(key):
        return MASKED_VALUE

    return value


def mask_parameters(params: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: mask_sensitive_value(k, v) for k, v in params.items()}
