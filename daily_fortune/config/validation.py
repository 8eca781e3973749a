"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

STORAGE_BACKENDS = ("sqlite", "memory")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_storage_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate durable store parameters."""
        errors = []

        backend = params.get("backend")
        if backend not in STORAGE_BACKENDS:
            errors.append(ValidationError(
                field="storage.backend",
                message=f"Must be one of {', '.join(STORAGE_BACKENDS)}",
                value=backend
            ))

        for key_field in ("fortune_key", "date_key"):
            value = params.get(key_field)
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field=f"storage.{key_field}",
                    message="Must be a non-empty string",
                    value=value
                ))

        if params.get("fortune_key") and params.get("fortune_key") == params.get("date_key"):
            errors.append(ValidationError(
                field="storage.date_key",
                message="Must differ from storage.fortune_key",
                value=params.get("date_key")
            ))

        if backend == "sqlite":
            db_path = params.get("db_path")
            if not isinstance(db_path, str) or not db_path:
                errors.append(ValidationError(
                    field="storage.db_path",
                    message="Must be a non-empty path for the sqlite backend",
                    value=db_path
                ))

        return errors

    @staticmethod
    def validate_provider_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate fortune provider parameters."""
        errors = []

        url = params.get("url")
        parsed = urlparse(url) if isinstance(url, str) else None
        if parsed is None or parsed.scheme not in ("http", "https") or not parsed.netloc:
            errors.append(ValidationError(
                field="provider.url",
                message="Must be an absolute http(s) URL",
                value=url
            ))

        timeout = params.get("timeout_seconds")
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            errors.append(ValidationError(
                field="provider.timeout_seconds",
                message="Must be a positive number",
                value=timeout
            ))

        for text_field in ("client_id", "placeholder_text", "default_error"):
            value = params.get(text_field)
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field=f"provider.{text_field}",
                    message="Must be a non-empty string",
                    value=value
                ))

        headers = params.get("headers")
        if headers is not None and not isinstance(headers, dict):
            errors.append(ValidationError(
                field="provider.headers",
                message="Must be a mapping of header names to values",
                value=headers
            ))

        return errors

    @staticmethod
    def validate_time_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate day-boundary parameters."""
        errors = []

        tz_name = params.get("timezone")
        if tz_name is not None:
            try:
                ZoneInfo(tz_name)
            except (ZoneInfoNotFoundError, ValueError, TypeError):
                errors.append(ValidationError(
                    field="time.timezone",
                    message="Must be a valid IANA time zone name",
                    value=tz_name
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        level = params.get("level")
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            errors.append(ValidationError(
                field="logging.level",
                message=f"Must be one of {', '.join(LOG_LEVELS)}",
                value=level
            ))

        return errors

    @classmethod
    def validate_config(cls, config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []
        errors.extend(cls.validate_storage_params(config.get("storage", {})))
        errors.extend(cls.validate_provider_params(config.get("provider", {})))
        errors.extend(cls.validate_time_params(config.get("time", {})))
        errors.extend(cls.validate_logging_params(config.get("logging", {})))
        return errors
