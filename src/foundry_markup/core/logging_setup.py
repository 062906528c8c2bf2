from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "foundry_markup"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_CONFIGURED_TARGET: str | None = None
_PACKAGE_HANDLER: logging.Handler | None = None


def _level_from_name(name: str) -> int:
    value = getattr(logging, str(name).upper(), None)
    return value if isinstance(value, int) else logging.WARNING


def configure_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> None:
    """Attach one handler to the package logger (stderr, or ``log_path``).

    Idempotent per-process: calling again with the same target only updates
    the level; a different target replaces the previous handler.
    """
    global _CONFIGURED_TARGET, _PACKAGE_HANDLER

    target = str(Path(log_path).resolve()) if log_path else "<stderr>"
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(_level_from_name(level))

    if _CONFIGURED_TARGET == target and _PACKAGE_HANDLER is not None:
        _PACKAGE_HANDLER.setLevel(_level_from_name(level))
        return

    if _PACKAGE_HANDLER is not None:
        package_logger.removeHandler(_PACKAGE_HANDLER)
        _PACKAGE_HANDLER.close()
        _PACKAGE_HANDLER = None

    if log_path:
        Path(target).parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)

    _PACKAGE_HANDLER = handler
    _CONFIGURED_TARGET = target


def configure_from_config(config: dict) -> None:
    """Configure logging from the ``logging`` config section."""
    section = config.get("logging") or {}
    log_file = section.get("file")
    configure_logging(
        level=str(section.get("level") or "WARNING"),
        log_path=Path(log_file) if log_file else None,
    )


def reset_logging_for_tests() -> None:
    """Test-only: remove the package handler."""
    global _CONFIGURED_TARGET, _PACKAGE_HANDLER
    if _PACKAGE_HANDLER is not None:
        logging.getLogger(PACKAGE_LOGGER).removeHandler(_PACKAGE_HANDLER)
        _PACKAGE_HANDLER.close()
    _PACKAGE_HANDLER = None
    _CONFIGURED_TARGET = None
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.NOTSET)


__all__ = ["configure_logging", "configure_from_config", "reset_logging_for_tests"]
