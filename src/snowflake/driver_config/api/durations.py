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

import re
from datetime import timedelta
from typing import Dict, Optional

from snowflake.driver_config.api.exceptions import InvalidDurationFormatError

_BARE_SECONDS_PATTERN = re.compile(r"^[0-9]+$")
_WITH_UNIT_PATTERN = re.compile(r"^([+-]?[0-9]+)([smh])$", re.IGNORECASE)

_UNIT_TO_SECONDS: Dict[str, int] = {
    "s": 1,
    "m": 60,
    "h": 60 * 60,
}


def parse_duration(text: str, parameter_name: Optional[str] = None) -> timedelta:
    """
    Parse a duration given as whole seconds ("30") or as a number with a
    unit suffix ("30s", "5m", "2h").
    """
    value = text.strip() if text is not None else ""

    if _BARE_SECONDS_PATTERN.match(value):
        seconds = int(value)
    else:
        match = _WITH_UNIT_PATTERN.match(value)
        if not match:
            raise InvalidDurationFormatError(text, parameter_name)
        number, unit = match.groups()
        seconds = int(number) * _UNIT_TO_SECONDS[unit.lower()]

    try:
        return timedelta(seconds=seconds)
    except OverflowError as err:
        raise InvalidDurationFormatError(text, parameter_name) from err
