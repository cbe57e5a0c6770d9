"""
Utility modules for TechMatch.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants
"""

from techmatch.utils.config import (
    AppSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
    PACKAGE_DIR,
)
from techmatch.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    AuditAction,
    ExperienceLevel,
    JobStatus,
    JobType,
    MatchScoreLevel,
)
from techmatch.utils.logger import (
    setup_logging,
    get_logger,
    audit_log,
    redact,
    log,
)

__all__ = [
    # Config
    "AppSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    "PACKAGE_DIR",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "AuditAction",
    "ExperienceLevel",
    "JobStatus",
    "JobType",
    "MatchScoreLevel",
    # Logger
    "setup_logging",
    "get_logger",
    "audit_log",
    "redact",
    "log",
]
