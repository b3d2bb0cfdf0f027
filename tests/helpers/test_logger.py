# Copyright 2025 iGenius S.p.A
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import io
import logging

from rich.console import Console
from rich.logging import RichHandler

from caf_naming.helpers.logger import setup_logger


def test_setup_logger_adds_rich_handler():
    """Creates a single Rich handler at the requested level."""
    logger = setup_logger(name="caf_naming.test_logger", level=logging.INFO)
    assert logger.level == logging.INFO
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)


def test_setup_logger_writes_to_given_console():
    buf = io.StringIO()
    logger = setup_logger(
        name="caf_naming.test_logger.console",
        level="DEBUG",
        console=Console(file=buf, width=200),
    )
    logger.debug("resolved 'kv-app'")
    assert "resolved 'kv-app'" in buf.getvalue()


def test_setup_logger_level_from_settings(monkeypatch):
    """Without an explicit level the CAF_NAMING_LOG_LEVEL setting applies."""
    from caf_naming.config.settings import reload_settings_cache

    monkeypatch.setenv("CAF_NAMING_LOG_LEVEL", "error")
    reload_settings_cache()
    logger = setup_logger(name="caf_naming.test_logger.settings")
    assert logger.level == logging.ERROR


def test_setup_logger_idempotent():
    """Returns existing logger when handlers are already configured."""
    name = "caf_naming.test_logger.idempotent"
    logger_first = setup_logger(name=name, level=logging.INFO)
    handler_count = len(logger_first.handlers)
    logger_second = setup_logger(name=name, level=logging.DEBUG)
    assert logger_second is logger_first
    assert len(logger_second.handlers) == handler_count
    assert logger_second.level == logging.DEBUG
