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

from dataclasses import dataclass, field, fields
from datetime import timedelta
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Optional

from snowflake.driver_config.api.masking import mask_sensitive_value

DEFAULT_QUERY_TIMEOUT = timedelta(minutes=5)

MAX_POOL_SIZE_RANGE = (1, 1000)
MIN_POOL_SIZE_RANGE = (0, 100)


class AuthenticationType(Enum):
    USERNAME_PASSWORD = "username_password"
    KEY_PAIR = "key_pair"
    OAUTH = "oauth"
    SSO = "sso"
    EXTERNAL_BROWSER = "external_browser"


class PoolOverflowPolicy(Enum):
    """What a pool does when it has no spare connection."""

    BLOCK = "block"
    REJECT = "reject"
    CREATE_NEW = "create_new"


@dataclass(frozen=True)
class ValidationResult:
    message: str
    member_names: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class AuthenticationConfig:
    type: AuthenticationType = AuthenticationType.USERNAME_PASSWORD
    password: Optional[str] = field(default=None, repr=False)
    private_key_path: Optional[str] = None
    private_key_passphrase: Optional[str] = field(default=None, repr=False)
    oauth_token: Optional[str] = field(default=None, repr=False)
    oauth_refresh_token: Optional[str] = field(default=None, repr=False)
    sso_properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        _freeze_mapping(self, "sso_properties")


@dataclass(frozen=True)
class ConnectionPoolConfig:
    max_pool_size: int = 10
    min_pool_size: int = 0
    connection_timeout: timedelta = timedelta(seconds=30)
    idle_timeout: timedelta = timedelta(minutes=10)
    max_connection_lifetime: timedelta = timedelta(hours=1)
    validate_on_acquire: bool = True
    cleanup_interval: timedelta = timedelta(minutes=1)
    enabled: bool = True
    overflow_policy: PoolOverflowPolicy = PoolOverflowPolicy.BLOCK


@dataclass(frozen=True)
class ConnectionConfig:
    account: str
    user: str
    database: Optional[str] = None
    schema: Optional[str] = None
    warehouse: Optional[str] = None
    role: Optional[str] = None
    authentication: AuthenticationConfig = field(default_factory=AuthenticationConfig)
    pool_config: ConnectionPoolConfig = field(default_factory=ConnectionPoolConfig)
    query_timeout: timedelta = DEFAULT_QUERY_TIMEOUT
    enable_compression: bool = True
    additional_properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        _freeze_mapping(self, "additional_properties")

    def to_dict(self, mask_secrets: bool = True) -> Dict[str, Any]:
        """Nested, JSON-ready representation. Durations are whole seconds."""
        return _as_plain_dict(self, mask_secrets)


def _freeze_mapping(obj: Any, name: str) -> None:
    # frozen dataclasses only allow assignment through object.__setattr__
    object.__setattr__(obj, name, MappingProxyType(dict(getattr(obj, name))))


def _as_plain_dict(obj: Any, mask_secrets: bool) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if hasattr(value, "__dataclass_fields__"):
            value = _as_plain_dict(value, mask_secrets)
        elif isinstance(value, Mapping):
            value = {
                k: mask_sensitive_value(k, v) if mask_secrets else v
                for k, v in value.items()
            }
        else:
            value = _plain_value(value)
            if mask_secrets:
                value = mask_sensitive_value(f.name, value)
        result[f.name] = value
    return result


def _plain_value(value: Any) -> Any:
    if isinstance(value, timedelta):
        return int(value.total_seconds())
    if isinstance(value, Enum):
        return value.value
    return value
