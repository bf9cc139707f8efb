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
from pathlib import Path
from typing import Dict, List, Optional

import click
import typer
from snowflake.driver_config import __about__
from snowflake.driver_config._app.loggers import create_loggers
from snowflake.driver_config._app.printing import (
    OutputFormat,
    print_collection,
    print_message,
    print_object,
)
from snowflake.driver_config.api.authentication import AUTHENTICATOR_ALIASES
from snowflake.driver_config.api.connections_file import load_connection_parameters
from snowflake.driver_config.api.parser import ConnectionConfigParser

log = logging.getLogger(__name__)

DEFAULT_CONNECTIONS_FILE = Path("~/.snowflake/connections.toml")


def _do_not_execute_on_completion(callback):
    def enriched_callback(value):
        if click.get_current_context().resilient_parsing:
            return
        callback(value)

    return enriched_callback


@_do_not_execute_on_completion
def _version_callback(value: bool):
    if value:
        print_message(f"Snowflake driver config version: {__about__.VERSION}")
        raise typer.Exit()


def _parse_defaults(defaults: Optional[List[str]]) -> Dict[str, str]:
    result: Dict[str, str] = {}
    for item in defaults or []:
        key, separator, value = item.partition("=")
        if not separator or not key.strip():
            raise typer.BadParameter(
                f"Expected KEY=VALUE but got '{item}'", param_hint="--default"
            )
        result[key.strip()] = value.strip()
    return result


def app_factory() -> typer.Typer:
    app = typer.Typer(
        name="snowconf",
        no_args_is_help=True,
        add_completion=False,
        help=f"Parse and validate Snowflake driver connection parameters [v{__about__.VERSION}]",
    )

    @app.callback()
    def default(
        version: bool = typer.Option(
            None,
            "--version",
            help="Shows version of the tool",
            callback=_version_callback,
            is_eager=True,
        ),
        verbose: bool = typer.Option(
            False, "--verbose", "-v", help="Displays log entries for log levels `info` and higher."
        ),
        debug: bool = typer.Option(
            False, "--debug", help="Displays log entries for log levels `debug` and higher."
        ),
        log_file: Optional[Path] = typer.Option(
            None, "--log-file", help="Also writes debug logs to this file.", dir_okay=False
        ),
    ):
        create_loggers(verbose=verbose, debug=debug, log_file=log_file)

    @app.command("check")
    def check(
        connection_string: Optional[str] = typer.Argument(
            None, help="Connection string, e.g. `account=acme;user=bob;password=...`."
        ),
        connection: Optional[str] = typer.Option(
            None,
            "--connection",
            "-c",
            help="Name of a connection defined in the connections file.",
        ),
        connections_file: Path = typer.Option(
            DEFAULT_CONNECTIONS_FILE,
            "--connections-file",
            help="TOML file with [connections.<name>] tables.",
            dir_okay=False,
        ),
        defaults: Optional[List[str]] = typer.Option(
            None,
            "--default",
            "-D",
            help="Default parameter as KEY=VALUE, overridden by the connection. Can be repeated.",
        ),
        output_format: OutputFormat = typer.Option(
            OutputFormat.TABLE, "--format", help="Output format.", case_sensitive=False
        ),
    ):
        """Parses connection parameters and prints the validated configuration."""
        if connection_string and connection:
            raise click.UsageError(
                "Provide either a connection string or --connection, not both."
            )
        if not connection_string and not connection:
            raise click.UsageError("Provide a connection string or --connection.")

        default_params = _parse_defaults(defaults)
        if connection:
            params = load_connection_parameters(connections_file, connection)
            config = ConnectionConfigParser.parse(params, default_params)
        else:
            config = ConnectionConfigParser.parse_connection_string(
                connection_string, default_params
            )

        log.info("Connection configuration for account %s is valid", config.account)
        print_object(config.to_dict(mask_secrets=True), output_format)

    @app.command("authenticators")
    def authenticators(
        output_format: OutputFormat = typer.Option(
            OutputFormat.TABLE, "--format", help="Output format.", case_sensitive=False
        ),
    ):
        """Lists accepted `authenticator` values."""
        rows = [
            {"alias": alias, "authentication_type": auth_type.value}
            for alias, auth_type in AUTHENTICATOR_ALIASES.items()
        ]
        print_collection(rows, output_format)

    return app
