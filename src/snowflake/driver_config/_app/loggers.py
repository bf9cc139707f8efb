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
import logging.config
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer

PACKAGE_LOGGER = "snowflake.driver_config"


@dataclass
class LogFormatterConfig:
    _format: str
    _class: str = "logging.Formatter"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class LoggerConfig:
    level: int = logging.NOTSET
    handlers: List[str] = field(default_factory=list)


@dataclass
class DefaultLoggingConfig:
    version: int = 1
    disable_existing_loggers: bool = False
    formatters: Dict[str, LogFormatterConfig] = field(
        default_factory=lambda: {
            "default_formatter": LogFormatterConfig(
                _format="%(asctime)s %(levelname)s %(message)s"
            ),
            "detailed_formatter": LogFormatterConfig(
                _format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
            ),
        }
    )
    filters: Dict[str, Any] = field(default_factory=dict)
    handlers: Dict[str, Any] = field(
        default_factory=lambda: {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default_formatter",
                "level": logging.ERROR,
            },
            "file": {
                "class": "logging.FileHandler",
                "filename": None,
                "formatter": "detailed_formatter",
                "level": logging.DEBUG,
            },
        },
    )
    loggers: Dict[str, Any] = field(
        default_factory=lambda: {
            PACKAGE_LOGGER: LoggerConfig(handlers=["console", "file"]),
        }
    )


def _remove_underscore_prefixes_from_keys(d: Dict[str, Any]) -> None:
    for k, v in list(d.items()):
        if k.startswith("_"):
            d[k[1:]] = d.pop(k)
        if isinstance(v, dict):
            _remove_underscore_prefixes_from_keys(v)


def create_loggers(verbose: bool, debug: bool, log_file: Optional[Path] = None):
    """Configures package loggers from the command line flags.
    verbose == True - print info and higher logs in default format
    debug == True - print debug and higher logs in debug format
    none of above - print only error logs in default format
    log_file - additionally write debug and higher logs to the given file
    """
    config = DefaultLoggingConfig()

    if verbose and debug:
        raise typer.BadParameter("Only one parameter `verbose` or `debug` is possible")
    elif debug:
        config.handlers["console"].update(
            level=logging.DEBUG,
            formatter="detailed_formatter",
        )
    elif verbose:
        config.handlers["console"].update(level=logging.INFO)

    global_log_level = config.handlers["console"]["level"]

    if log_file is not None:
        config.handlers["file"].update(filename=str(log_file))
        global_log_level = min(global_log_level, config.handlers["file"]["level"])
    else:
        # the file handler would fail to build without a filename
        del config.handlers["file"]
        for logger in config.loggers.values():
            if "file" in logger.handlers:
                logger.handlers.remove("file")

    config.loggers[PACKAGE_LOGGER].level = global_log_level

    _configurate_logging(config)


def _configurate_logging(config: DefaultLoggingConfig) -> None:
    dict_config = asdict(config)
    _remove_underscore_prefixes_from_keys(dict_config)
    logging.config.dictConfig(dict_config)
