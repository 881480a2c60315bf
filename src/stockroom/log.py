"""Loggers for the domain modules.

Events are rendered by structlog and emitted through the standard library
logger of the same name, so an application that never configures logging
sees nothing.  ``stockroom.infrastructure.logging_config`` wires the
handlers the CLI uses.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

logging.getLogger("stockroom").addHandler(logging.NullHandler())


def get_logger(name: str) -> Any:
    return structlog.wrap_logger(logging.getLogger(name))
