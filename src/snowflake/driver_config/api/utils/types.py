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
from typing import Any, Dict, Mapping, Optional

Parameters = Mapping[str, str]
ParametersDict = Dict[str, str]

_INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")
INT32_RANGE = (-(2**31), 2**31 - 1)


def try_cast_to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value

    # Now if value is not string then cast it to str. Simplifies logic for 1 and 0
    if not isinstance(value, str):
        value = str(value)

    know_booleans_mapping = {"true": True, "false": False, "1": True, "0": False}

    if value.strip().lower() not in know_booleans_mapping:
        raise ValueError(f"Could not cast {value} to bool value")
    return know_booleans_mapping[value.strip().lower()]


def try_parse_int(value: Optional[str]) -> Optional[int]:
    """
    Base-10 integer or None. Underscores and non-ASCII digits are rejected.
    Values outside the 32-bit range count as unparsable.
    """
    if value is None:
        return None
    value = value.strip()
    if not _INTEGER_PATTERN.match(value):
        return None
    number = int(value)
    if not INT32_RANGE[0] <= number <= INT32_RANGE[1]:
        return None
    return number
