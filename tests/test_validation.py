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

import pytest
from snowflake.driver_config.api.models import (
    AuthenticationConfig,
    AuthenticationType,
    ConnectionConfig,
    ConnectionPoolConfig,
    ValidationResult,
)
from snowflake.driver_config.api.validation import (
    validate_authentication,
    validate_config,
    validate_pool_ranges,
    validate_required_fields,
)


def _config(**overrides) -> ConnectionConfig:
    settings = dict(
        account="acme",
        user="bob",
        authentication=AuthenticationConfig(password="secret"),
    )
    settings.update(overrides)
    return ConnectionConfig(**settings)


def test_valid_config_has_no_violations():
    assert validate_config(_config()) == []


@pytest.mark.parametrize("field_name", ["account", "user"])
def test_required_fields(field_name):
    results = validate_required_fields(_config(**{field_name: ""}))

    assert results == [
        ValidationResult(
            f"The {field_name} field is required.", frozenset({field_name})
        )
    ]


@pytest.mark.parametrize(
    "auth_type, missing_field",
    [
        (AuthenticationType.USERNAME_PASSWORD, "password"),
        (AuthenticationType.KEY_PAIR, "private_key_path"),
        (AuthenticationType.OAUTH, "oauth_token"),
    ],
)
def test_authentication_requires_field_for_type(auth_type, missing_field):
    results = validate_authentication(AuthenticationConfig(type=auth_type))

    assert len(results) == 1
    assert results[0].member_names == frozenset({missing_field})


@pytest.mark.parametrize(
    "auth_type", [AuthenticationType.SSO, AuthenticationType.EXTERNAL_BROWSER]
)
def test_authentication_without_required_fields(auth_type):
    assert validate_authentication(AuthenticationConfig(type=auth_type)) == []


def test_authentication_only_checks_field_of_its_type():
    authentication = AuthenticationConfig(
        type=AuthenticationType.KEY_PAIR, private_key_path="/keys/key.p8"
    )

    assert validate_authentication(authentication) == []


@pytest.mark.parametrize(
    "max_pool_size, min_pool_size, invalid_fields",
    [
        (1, 0, []),
        (1000, 100, []),
        (0, 0, ["max_pool_size"]),
        (1001, 0, ["max_pool_size"]),
        (10, -1, ["min_pool_size"]),
        (10, 101, ["min_pool_size"]),
        (0, 101, ["max_pool_size", "min_pool_size"]),
    ],
)
def test_pool_ranges(max_pool_size, min_pool_size, invalid_fields):
    pool = ConnectionPoolConfig(max_pool_size=max_pool_size, min_pool_size=min_pool_size)

    results = validate_pool_ranges(_config(pool_config=pool))

    assert [next(iter(r.member_names)) for r in results] == invalid_fields


def test_range_message():
    results = validate_pool_ranges(
        _config(pool_config=ConnectionPoolConfig(max_pool_size=1001))
    )

    assert results[0].message == "The field max_pool_size must be between 1 and 1000."


def test_all_rules_are_reported_in_order():
    config = _config(
        account="",
        user="",
        authentication=AuthenticationConfig(type=AuthenticationType.OAUTH),
        pool_config=ConnectionPoolConfig(max_pool_size=0, min_pool_size=500),
    )

    results = validate_config(config)

    assert [sorted(r.member_names)[0] for r in results] == [
        "account",
        "user",
        "oauth_token",
        "max_pool_size",
        "min_pool_size",
    ]
