"""
Logging infrastructure for TechMatch.

Loguru sinks for the console, a rotating application log, and an audit
log that records every matching decision as one JSON line.
"""

import json
import sys
from typing import Any, Optional, Union

from loguru import logger

from techmatch.utils.config import AppSettings, get_settings
from techmatch.utils.constants import AuditAction

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> | "
    "<level>{message}</level>"
)

# Header and credential names that must never reach a log file
REDACTED_KEYS = frozenset(
    {"password", "secret", "token", "apikey", "api_key", "authorization", "credential"}
)


def _audit_format(record: dict[str, Any]) -> str:
    entry = {
        "time": record["time"].isoformat(),
        "action": record["extra"]["audit_action"],
        "details": record["extra"].get("audit_details", {}),
    }
    # Escape braces so loguru does not treat the JSON as a format string
    line = json.dumps(entry, default=str).replace("{", "{{").replace("}", "}}")
    return line + "\n"


def setup_logging(settings: Optional[AppSettings] = None) -> None:
    """
    Configure application-wide logging.

    Replaces loguru's default sink. File sinks are only installed when
    ``LOG_FILE_OUTPUT`` is enabled.
    """
    settings = settings or get_settings()
    log_settings = settings.logging

    logger.remove()
    logger.configure(extra={"name": settings.name})

    # diagnose=False outside development keeps request payloads out of tracebacks
    enable_diagnose = settings.debug and settings.environment == "development"

    if log_settings.console_output:
        logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=log_settings.level,
            colorize=True,
            diagnose=enable_diagnose,
            filter=lambda record: "audit_action" not in record["extra"],
        )

    if not log_settings.file_output:
        return

    log_settings.file_path.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_settings.file_path,
        format=log_settings.format,
        level=log_settings.level,
        rotation=log_settings.rotation,
        retention=log_settings.retention,
        compression="zip",
        diagnose=enable_diagnose,
        enqueue=True,
        filter=lambda record: "audit_action" not in record["extra"],
    )

    audit_path = log_settings.audit_path
    audit_path.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        audit_path,
        format=_audit_format,
        level="INFO",
        filter=lambda record: "audit_action" in record["extra"],
        rotation="1 week",
        retention="1 year",
        enqueue=True,
    )

    logger.debug(f"Logging initialized at {log_settings.level}")


def get_logger(name: str) -> Any:
    """Get a logger bound to a module name (typically ``__name__``)."""
    return logger.bind(name=name)


def redact(data: Any) -> Any:
    """Mask credential-like keys in nested dicts and lists."""
    if isinstance(data, dict):
        return {
            k: "***" if any(s in str(k).lower() for s in REDACTED_KEYS) else redact(v)
            for k, v in data.items()
        }
    if isinstance(data, (list, tuple)):
        return [redact(item) for item in data]
    return data


def audit_log(action: Union[AuditAction, str], details: dict[str, Any]) -> None:
    """
    Record a matching decision in the audit log.

    Args:
        action: What was decided, e.g. ``AuditAction.CANDIDATES_MATCHED``
        details: JSON-serializable facts about the decision
    """
    if isinstance(action, AuditAction):
        action = action.value
    logger.bind(audit_action=action, audit_details=redact(details)).info(action)


# Module-level logger for quick access
log = logger


try:
    setup_logging()
except OSError as e:
    # Unwritable log directory: fall back to console-only logging
    logger.warning(f"File logging disabled: {e}")
