"""Default configuration parameters for the daily fortune app."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class StorageParams:
    """Durable store parameters."""
    backend: str = "sqlite"                          # sqlite | memory
    db_path: str = "fortune.db"
    fortune_key: str = "todaysFortune"               # Serialized Fortune JSON
    date_key: str = "lastGeneratedDate"              # Calendar day of last generation


@dataclass(frozen=True)
class ProviderParams:
    """Fortune provider endpoint parameters."""
    url: str = "http://localhost:3000/api/generate-fortune"
    method: str = "POST"
    timeout_seconds: int = 30
    client_id: str = "DailyFortuneApp"               # Sent as userAgent
    placeholder_text: str = "Your fortune awaits tomorrow."
    default_error: str = "Failed to generate fortune"
    headers: Optional[dict[str, str]] = None


@dataclass(frozen=True)
class TimeParams:
    """Day-boundary parameters."""
    timezone: Optional[str] = None                   # None = device-local


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete configuration."""
    storage: StorageParams
    provider: ProviderParams
    time: TimeParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        storage=StorageParams(),
        provider=ProviderParams(),
        time=TimeParams(),
        logging=LoggingParams(),
    )
