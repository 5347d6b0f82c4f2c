"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

VALID_PLACEHOLDERS = ("?", "%s")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_environment_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate service-binding lookup parameters."""
        errors = []

        for name in ("db_service_name", "passel_service_name", "passel_key"):
            if name in params:
                value = params[name]
                if not isinstance(value, str) or not value.strip():
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-empty string",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_store_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate state table access parameters."""
        errors = []

        if "placeholder" in params:
            value = params["placeholder"]
            if value not in VALID_PLACEHOLDERS:
                errors.append(ValidationError(
                    field="placeholder",
                    message=f"Must be one of {', '.join(VALID_PLACEHOLDERS)}",
                    value=value
                ))

        if "strict_writes" in params:
            value = params["strict_writes"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="strict_writes",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
                    value=value
                ))

        for name in ("format_json", "include_timestamp", "include_caller"):
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a boolean",
                    value=params[name]
                ))

        return errors

    @classmethod
    def validate_config(cls, config: dict[str, Any]) -> list[ValidationError]:
        """Validate a complete merged configuration."""
        errors = []

        if "environment" in config:
            errors.extend(cls.validate_environment_params(config["environment"]))

        if "store" in config:
            errors.extend(cls.validate_store_params(config["store"]))

        if "logging" in config:
            errors.extend(cls.validate_logging_params(config["logging"]))

        return errors
