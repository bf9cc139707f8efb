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
from typing import Dict, Optional

from snowflake.driver_config.api.exceptions import UnsupportedAuthenticatorError
from snowflake.driver_config.api.models import AuthenticationConfig, AuthenticationType
from snowflake.driver_config.api.parameters import (
    OAUTH_TOKEN_KEYS,
    PRIVATE_KEY_PASSPHRASE_KEYS,
    PRIVATE_KEY_PATH_KEYS,
    SSO_PREFIX,
    get_first_value,
)
from snowflake.driver_config.api.utils.types import Parameters

log = logging.getLogger(__name__)

AUTHENTICATOR_ALIASES: Dict[str, AuthenticationType] = {
    "default": AuthenticationType.USERNAME_PASSWORD,
    "snowflake": AuthenticationType.USERNAME_PASSWORD,
    "key_pair": AuthenticationType.KEY_PAIR,
    "jwt": AuthenticationType.KEY_PAIR,
    "snowflake_jwt": AuthenticationType.KEY_PAIR,
    "oauth": AuthenticationType.OAUTH,
    "sso": AuthenticationType.SSO,
    "externalbrowser": AuthenticationType.EXTERNAL_BROWSER,
}


def resolve_authenticator(authenticator: Optional[str]) -> AuthenticationType:
    if authenticator is None or not authenticator.strip():
        return AuthenticationType.USERNAME_PASSWORD
    try:
        return AUTHENTICATOR_ALIASES[authenticator.strip().lower()]
    except KeyError:
        raise UnsupportedAuthenticatorError(authenticator)


def build_authentication_config(params: Parameters) -> AuthenticationConfig:
    auth_type = resolve_authenticator(params.get("authenticator"))
    log.debug("Resolved authentication type %s", auth_type.name)

    return AuthenticationConfig(
        type=auth_type,
        password=get_first_value(params, "password"),
        private_key_path=get_first_value(params, *PRIVATE_KEY_PATH_KEYS),
        private_key_passphrase=get_first_value(params, *PRIVATE_KEY_PASSPHRASE_KEYS),
        oauth_token=get_first_value(params, *OAUTH_TOKEN_KEYS),
        oauth_refresh_token=get_first_value(params, "oauth_refresh_token"),
        sso_properties=_extract_sso_properties(params),
    )


def _extract_sso_properties(params: Parameters) -> Dict[str, str]:
    prefix_length = len(SSO_PREFIX)
    return {
        key[prefix_length:]: value
        for key, value in params.items()
        if key.lower().startswith(SSO_PREFIX)
    }
