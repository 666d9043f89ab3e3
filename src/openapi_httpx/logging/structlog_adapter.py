# Copyright 2026 Firefly Software Solutions Inc.
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
"""StructlogAdapter: structured rendering for the ``openapi_httpx`` loggers.

The package logs through stdlib ``logging`` under the ``openapi_httpx``
hierarchy. Until this adapter is configured those records follow the host
application's logging setup (an unconfigured root drops debug events).
Configuring the adapter attaches one structlog-rendered handler to the
``openapi_httpx`` logger only; the root logger and structlog's global
configuration are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

from openapi_httpx.core.config import Config

PACKAGE_LOGGER = "openapi_httpx"


class StructlogAdapter:
    """Logging adapter backed by structlog.

    Reads ``openapi_httpx.logging.level`` (``root`` is the level of the
    package logger, other keys are per-logger levels such as
    ``openapi_httpx.transport: DEBUG``) and ``openapi_httpx.logging.format``
    (``console`` or ``json``).

    Usage::

        adapter = StructlogAdapter()
        adapter.configure(Config.from_file("openapi-httpx.yaml"))
        log = adapter.get_logger("openapi_httpx.app")
        log.info("client_ready", base_url="https://api.example.com")
    """

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream
        self._level: str = "INFO"
        self._format: str = "console"
        self._module_levels: dict[str, str] = {}
        self._handler: logging.Handler | None = None

    def configure(self, config: Config) -> None:
        """Install the package handler from the logging section of config.

        Calling this again replaces the handler installed by the previous call.
        """
        level_section = dict(config.get_section("openapi_httpx.logging.level"))
        self._level = str(level_section.pop("root", "INFO")).upper()
        self._module_levels = {k: str(v).upper() for k, v in level_section.items()}
        self._format = str(config.get("openapi_httpx.logging.format", "console")).lower()

        self._install_handler()
        self.set_level(PACKAGE_LOGGER, self._level)
        for name, level in self._module_levels.items():
            self.set_level(name, level)

    def reset(self) -> None:
        """Remove the installed handler and hand the package logger back to the host."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        if self._handler is not None:
            package_logger.removeHandler(self._handler)
            self._handler.close()
            self._handler = None
        package_logger.propagate = True
        package_logger.setLevel(logging.NOTSET)

    def get_logger(self, name: str) -> Any:
        """Get a structlog BoundLogger that writes through the stdlib logger *name*."""
        return structlog.wrap_logger(
            logging.getLogger(name),
            processors=[
                structlog.stdlib.filter_by_level,
                *self._shared_processors(),
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
        )

    def set_level(self, name: str, level: str) -> None:
        """Set the log level for a specific stdlib logger."""
        log_level = getattr(logging, level.upper(), logging.INFO)
        logging.getLogger(name).setLevel(log_level)

    @staticmethod
    def _shared_processors() -> list[structlog.types.Processor]:
        return [
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
        ]

    def _renderer(self) -> structlog.types.Processor:
        if self._format == "json":
            return structlog.processors.JSONRenderer()
        return structlog.dev.ConsoleRenderer(colors=False)

    def _install_handler(self) -> None:
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                self._renderer(),
            ],
            foreign_pre_chain=[
                *self._shared_processors(),
                structlog.stdlib.ExtraAdder(),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.UnicodeDecoder(),
            ],
        )
        handler = logging.StreamHandler(self._stream if self._stream is not None else sys.stderr)
        handler.setFormatter(formatter)

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        if self._handler is not None:
            package_logger.removeHandler(self._handler)
            self._handler.close()
        package_logger.addHandler(handler)
        package_logger.propagate = False
        self._handler = handler
