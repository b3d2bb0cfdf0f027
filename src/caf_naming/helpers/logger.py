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

import logging

from rich.console import Console
from rich.logging import RichHandler

from caf_naming.config.settings import get_settings


def setup_logger(
    name: str = "caf_naming",
    level: int | str | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """Return a logger writing through Rich to stderr.

    Generated names are the only thing the CLI writes to stdout, so every
    handler targets stderr. When ``level`` is omitted the ``log_level`` setting
    (``CAF_NAMING_LOG_LEVEL``) is used.
    """
    if level is None:
        level = get_settings().log_level.upper()

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False  # Avoid duplicate logs

    if logger.handlers:
        return logger

    handler = RichHandler(
        level=logging.NOTSET,
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        markup=False,
        show_time=True,
        show_level=True,
        show_path=False,
    )
    logger.addHandler(handler)
    return logger
