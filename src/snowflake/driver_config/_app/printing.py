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

import json
from enum import Enum
from typing import Any, Dict, Iterator, List, Tuple

from rich import box, get_console
from rich.table import Table
from rich.text import Text

# ensure we do not break long values that wrap lines
get_console().soft_wrap = True


class OutputFormat(str, Enum):
    TABLE = "TABLE"
    JSON = "JSON"


def _flatten(data: Dict[str, Any], prefix: str = "") -> Iterator[Tuple[str, Any]]:
    for key, value in data.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict) and value:
            yield from _flatten(value, prefix=f"{name}.")
        else:
            yield name, value


def print_object(data: Dict[str, Any], output_format: OutputFormat) -> None:
    if output_format == OutputFormat.JSON:
        print(json.dumps(data, indent=4))
        return

    table = Table("key", "value", box=box.ASCII)
    for key, value in _flatten(data):
        table.add_row(Text(key), Text("" if value is None else str(value)))
    get_console().print(table)


def print_collection(rows: List[Dict[str, Any]], output_format: OutputFormat) -> None:
    if output_format == OutputFormat.JSON:
        print(json.dumps(rows, indent=4))
        return

    if not rows:
        get_console().print("No data")
        return
    table = Table(*rows[0].keys(), box=box.ASCII)
    for row in rows:
        table.add_row(*(Text(str(v)) for v in row.values()))
    get_console().print(table)


def print_message(message: str) -> None:
    get_console().print(message, markup=False)
