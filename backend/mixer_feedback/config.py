"""
Environment-driven settings.

Settings only affect logging. They never change which predicates a registry
contains or how they evaluate.

Environment variables:
- MIXER_FEEDBACK_LOG_LEVEL: package log level (default WARNING)
- MIXER_FEEDBACK_LOG_REJECTIONS: "true" to log rejected options and
  snapshots at DEBUG regardless of the package level
"""

import logging
import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

ENV_LOG_LEVEL = "MIXER_FEEDBACK_LOG_LEVEL"
ENV_LOG_REJECTIONS = "MIXER_FEEDBACK_LOG_REJECTIONS"

PACKAGE_LOGGER = "mixer_feedback"

# Loggers that report rejected host input
REJECTION_LOGGERS = (
    "mixer_feedback.options.schema",
    "mixer_feedback.state.snapshot",
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class FeedbackSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    log_level: LogLevel = "WARNING"
    log_rejections: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    @classmethod
    def from_env(cls) -> "FeedbackSettings":
        """Read settings from the process environment."""
        return cls(
            log_level=os.environ.get(ENV_LOG_LEVEL, "WARNING"),
            log_rejections=os.environ.get(ENV_LOG_REJECTIONS, "false").lower() == "true",
        )


def configure_logging(settings: FeedbackSettings) -> None:
    """Apply settings to the package loggers. Handlers are left to the host."""
    logging.getLogger(PACKAGE_LOGGER).setLevel(settings.log_level)
    for name in REJECTION_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if settings.log_rejections else logging.NOTSET)
