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

from datetime import timedelta

import pytest
from snowflake.driver_config.api.durations import parse_duration
from snowflake.driver_config.api.exceptions import InvalidDurationFormatError
from snowflake.driver_config.api.parser import parse_parameters


@pytest.mark.parametrize(
    "text, expected",
    [
        ("30", timedelta(seconds=30)),
        ("0", timedelta(0)),
        ("30s", timedelta(seconds=30)),
        ("5m", timedelta(minutes=5)),
        ("2h", timedelta(hours=2)),
        ("2H", timedelta(hours=2)),
        ("10M", timedelta(minutes=10)),
        (" 45s ", timedelta(seconds=45)),
        ("+3m", timedelta(minutes=3)),
    ],
)
def test_parse_duration(text, expected):
    assert parse_duration(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "abc",
        "",
        "1.5m",
        "5d",
        "m",
        "5 m",
        "-30",
        "1_000",
        "٣s",
        "5ms",
        "99999999999999999999",
        "99999999999999h",
    ],
)
def test_parse_duration_rejects_invalid_text(text):
    with pytest.raises(InvalidDurationFormatError) as err:
        parse_duration(text)

    assert err.value.value == text
    assert err.value.exit_code == 2


def test_invalid_duration_error_names_the_parameter():
    with pytest.raises(InvalidDurationFormatError) as err:
        parse_duration("soon", parameter_name="pool_idle_timeout")

    assert err.value.parameter_name == "pool_idle_timeout"
    assert err.value.message.startswith("Parameter 'pool_idle_timeout':")
    assert "'soon'" in err.value.message


@pytest.mark.parametrize(
    "key, value",
    [
        ("pool_idle_timeout", "99999999999999999999"),
        ("pool_max_lifetime", "99999999999999h"),
    ],
)
def test_out_of_range_pool_duration_fails_parse(basic_params, key, value):
    with pytest.raises(InvalidDurationFormatError) as err:
        parse_parameters({**basic_params, key: value})

    assert err.value.parameter_name == key
