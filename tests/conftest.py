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
from logging import FileHandler
from pathlib import Path
from textwrap import dedent
from unittest import mock

import pytest
from rich import box
from typer.testing import CliRunner

from snowflake.driver_config._app.cli_app import app_factory


def clean_logging_handlers():
    for logger in [logging.getLogger()] + list(
        logging.Logger.manager.loggerDict.values()
    ):
        handlers = [hdl for hdl in getattr(logger, "handlers", [])]
        for handler in handlers:
            logger.removeHandler(handler)
            if isinstance(handler, FileHandler):
                handler.close()


# This automatically used cleanup fixture is required to avoid random breaking of logging
# between tests which configure loggers through the CLI callback.
@pytest.fixture(autouse=True)
def clean_logging_handlers_fixture():
    yield
    clean_logging_handlers()


@pytest.fixture(autouse=True, scope="session")
def mocked_rich():
    from rich.panel import Panel

    class CustomPanel(Panel):
        def __init__(self, *arg, **kwargs):
            super().__init__(*arg, box=box.ASCII, **kwargs)

    # The box can be configured for typer but unfortunately it's not passed down the line to `Panel`
    # that's being used for printing errors.
    with mock.patch("typer.rich_utils.Panel", CustomPanel):
        yield


class DriverConfigRunner(CliRunner):
    def __init__(self):
        super().__init__()
        self.app = app_factory()

    def invoke(self, args, **kw):
        return super().invoke(self.app, args, **kw)


@pytest.fixture
def runner():
    return DriverConfigRunner()


@pytest.fixture
def basic_params():
    return {"account": "acme", "user": "bob", "password": "secret"}


@pytest.fixture
def connections_file(tmp_path) -> Path:
    path = tmp_path / "connections.toml"
    path.write_text(
        dedent(
            """\
            [connections.dev]
            account = "acme"
            user = "bob"
            password = "secret"
            max_pool_size = 20
            enable_compression = false

            [connections.jwt]
            account = "acme"
            user = "svc"
            authenticator = "SNOWFLAKE_JWT"
            private_key_file = "/keys/rsa_key.p8"

            [connections.broken]
            account = "acme"
            user = "bob"
            authenticator = "oauth"
            """
        )
    )
    return path
