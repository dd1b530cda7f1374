"""Leveled console logging for the tracker."""

from __future__ import annotations

import logging
from typing import Any


class SimpleLogger:
    """Small wrapper around :mod:`logging` handed to components that report progress.

    Components receive an instance instead of reaching for a global, so tests can
    swap in anything exposing the same leveled methods.
    """

    def __init__(self, name: str = "token_tracker") -> None:
        self._logger = logging.getLogger(name)
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)
        self.configure()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def configure(self, level: int = logging.INFO) -> None:
        self._logger.setLevel(level)

    # ------------------------------------------------------------------
    # Basic logging methods
    # ------------------------------------------------------------------
    def debug(self, msg: str, source: str | None = None, payload: Any | None = None) -> None:
        self._logger.debug(self._format(msg, source, payload))

    def info(self, msg: str, source: str | None = None, payload: Any | None = None) -> None:
        self._logger.info(self._format(msg, source, payload))

    def success(self, msg: str, source: str | None = None, payload: Any | None = None) -> None:
        self._logger.info(self._format(f"✔ {msg}", source, payload))

    def warning(self, msg: str, source: str | None = None, payload: Any | None = None) -> None:
        self._logger.warning(self._format(msg, source, payload))

    def error(self, msg: str, source: str | None = None, payload: Any | None = None) -> None:
        self._logger.error(self._format(msg, source, payload))

    def banner(self, msg: str, source: str | None = None, payload: Any | None = None) -> None:
        self._logger.info(self._format(f"==== {msg} ====", source, payload))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _format(self, msg: str, source: str | None, payload: Any | None = None) -> str:
        base = f"[{source}] {msg}" if source else msg
        if payload is not None:
            base = f"{base} {payload}"
        return base


# Public API ---------------------------------------------------------------
log = SimpleLogger()


def configure_console_log(debug: bool = False) -> None:
    """Configure the console logger."""
    level = logging.DEBUG if debug else logging.INFO
    log.configure(level)


__all__ = ["SimpleLogger", "log", "configure_console_log"]
