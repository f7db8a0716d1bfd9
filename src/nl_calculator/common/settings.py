"""Runtime settings, overridable through environment variables."""
import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Environment variables read by CalculatorSettings.from_env
LOG_LEVEL_ENV: str = "NL_CALC_LOG_LEVEL"
PRECISION_ENV: str = "NL_CALC_PRECISION"

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class CalculatorSettings(BaseModel):
    """Settings of the command-line front end and batch runner."""

    # Settings are read once at startup and must not change afterwards
    model_config = ConfigDict(frozen=True)

    log_level: str = Field(default="WARNING", description="Minimum level of log messages written to stderr")
    display_precision: int = Field(default=10, ge=0, le=15, description="Maximum decimals shown for results")
    output_suffix: str = Field(default="_results.txt", description="Suffix of batch result files")

    @field_validator("log_level")
    def log_level_must_be_known(cls, v: str) -> str:
        """Ensure that the log level is one loguru understands."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @classmethod
    def from_env(cls) -> "CalculatorSettings":
        """
        Build settings from environment variables, falling back to defaults.

        :return: Validated settings
        :rtype: CalculatorSettings
        :raises pydantic.ValidationError: If a variable holds an invalid value
        """
        overrides = {}
        if os.getenv(LOG_LEVEL_ENV):
            overrides["log_level"] = os.environ[LOG_LEVEL_ENV]
        if os.getenv(PRECISION_ENV):
            overrides["display_precision"] = os.environ[PRECISION_ENV]
        return cls(**overrides)
