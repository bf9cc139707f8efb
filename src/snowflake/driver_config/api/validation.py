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

"""
Validation rules for a built ConnectionConfig.

Every rule runs, so callers get all problems in one pass. Rules are plain
functions returning lists of ValidationResult and are evaluated in a fixed
order: required fields, authentication, pool ranges.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple

from snowflake.driver_config.api.models import (
    MAX_POOL_SIZE_RANGE,
    MIN_POOL_SIZE_RANGE,
    AuthenticationConfig,
    AuthenticationType,
    ConnectionConfig,
    ValidationResult,
)

# Authentication type -> (attribute that must be non-empty, message)
REQUIRED_AUTHENTICATION_FIELDS: Dict[AuthenticationType, Tuple[str, str]] = {
    AuthenticationType.USERNAME_PASSWORD: (
        "password",
        "Password is required for username/password authentication.",
    ),
    AuthenticationType.KEY_PAIR: (
        "private_key_path",
        "Private key path is required for key pair authentication.",
    ),
    AuthenticationType.OAUTH: (
        "oauth_token",
        "OAuth token is required for OAuth authentication.",
    ),
}


def _required(value: Optional[str], field_name: str) -> List[ValidationResult]:
    if value:
        return []
    return [
        ValidationResult(
            f"The {field_name} field is required.", frozenset({field_name})
        )
    ]


def _in_range(value: int, bounds: Tuple[int, int], field_name: str):
    low, high = bounds
    if low <= value <= high:
        return []
    return [
        ValidationResult(
            f"The field {field_name} must be between {low} and {high}.",
            frozenset({field_name}),
        )
    ]


def validate_required_fields(config: ConnectionConfig) -> List[ValidationResult]:
    return _required(config.account, "account") + _required(config.user, "user")


def validate_authentication(
    authentication: AuthenticationConfig,
) -> List[ValidationResult]:
    requirement = REQUIRED_AUTHENTICATION_FIELDS.get(authentication.type)
    if requirement is None:
        # SSO and external browser do not need anything up front
        return []
    field_name, message = requirement
    if getattr(authentication, field_name):
        return []
    return [ValidationResult(message, frozenset({field_name}))]


def validate_pool_ranges(config: ConnectionConfig) -> List[ValidationResult]:
    pool = config.pool_config
    return _in_range(
        pool.max_pool_size, MAX_POOL_SIZE_RANGE, "max_pool_size"
    ) + _in_range(pool.min_pool_size, MIN_POOL_SIZE_RANGE, "min_pool_size")


_RULES: Tuple[Callable[[ConnectionConfig], List[ValidationResult]], ...] = (
    validate_required_fields,
    lambda config: validate_authentication(config.authentication),
    validate_pool_ranges,
)


def validate_config(config: ConnectionConfig) -> List[ValidationResult]:
    """Returns every violation found; an empty list means the config is valid."""
    results: List[ValidationResult] = []
    for rule in _RULES:
        results.extend(rule(config))
    return results
