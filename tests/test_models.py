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
from snowflake.driver_config.api.masking import (
    MASKED_VALUE,
    mask_parameters,
    should_mask_value,
)
from snowflake.driver_config.api.models import AuthenticationConfig, ConnectionConfig
from snowflake.driver_config.api.parser import parse_parameters


@pytest.mark.parametrize(
    "key, expected",
    [
        ("password", True),
        ("PASSWORD", True),
        ("private_key_pwd", True),
        ("private_key_passphrase", True),
        ("token", True),
        ("oauth_refresh_token", True),
        ("sso_client_secret", True),
        ("private_key_file", False),
        ("private_key_path", False),
        ("account", False),
    ],
)
def test_should_mask_value(key, expected):
    assert should_mask_value(key) is expected


def test_mask_parameters():
    assert mask_parameters({"user": "bob", "password": "secret", "token": None}) == {
        "user": "bob",
        "password": MASKED_VALUE,
        "token": None,
    }


def test_to_dict_masks_secrets_and_flattens_types():
    config = parse_parameters(
        {
            "account": "acme",
            "user": "bob",
            "password": "secret",
            "pool_idle_timeout": "2m",
            "sso_client_secret": "shh",
            "sso_provider": "okta",
            "custom": "value",
        }
    )

    result = config.to_dict()

    assert result["account"] == "acme"
    assert result["query_timeout"] == 300
    assert result["enable_compression"] is True
    assert result["additional_properties"] == {"custom": "value"}
    assert result["authentication"]["type"] == "username_password"
    assert result["authentication"]["password"] == MASKED_VALUE
    assert result["authentication"]["oauth_token"] is None
    assert result["authentication"]["sso_properties"] == {
        "client_secret": MASKED_VALUE,
        "provider": "okta",
    }
    assert result["pool_config"]["idle_timeout"] == 120
    assert result["pool_config"]["overflow_policy"] == "block"


def test_to_dict_without_masking():
    config = parse_parameters({"account": "acme", "user": "bob", "password": "secret"})

    assert config.to_dict(mask_secrets=False)["authentication"]["password"] == "secret"


def test_mapping_fields_are_read_only():
    config = ConnectionConfig(
        account="acme",
        user="bob",
        authentication=AuthenticationConfig(sso_properties={"provider": "okta"}),
        additional_properties={"custom": "value"},
    )

    with pytest.raises(TypeError):
        config.additional_properties["custom"] = "changed"
    with pytest.raises(TypeError):
        config.authentication.sso_properties["provider"] = "changed"

    assert config.additional_properties == {"custom": "value"}
    assert config.to_dict()["authentication"]["sso_properties"] == {"provider": "okta"}


def test_mapping_fields_do_not_share_the_callers_dict():
    properties = {"custom": "value"}
    config = ConnectionConfig(account="acme", user="bob", additional_properties=properties)

    properties["custom"] = "changed"

    assert config.additional_properties["custom"] == "value"
