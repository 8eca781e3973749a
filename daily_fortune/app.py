"""
Application coordinator.

Builds the durable store, the fortune provider and the lifecycle manager
from configuration and runs startup reconciliation.
"""

from pathlib import Path
from typing import Any, Callable, Optional, Union

import structlog

from .config.defaults import DefaultConfig, ProviderParams, StorageParams
from .config.loader import ConfigLoader
from .errors import ConfigurationError
from .logging.config import configure_logging
from .provider.base import FortuneProvider
from .provider.http_provider import HttpFortuneProvider
from .state.manager import DailyFortuneManager, Subscriber
from .state.models import GenerationResult, LifecycleState
from .storage.base import KeyValueStore
from .storage.memory_store import InMemoryStore
from .storage.sqlite_store import SqliteKeyValueStore
from .utils.time import Clock, make_calendar_day, now_utc

logger = structlog.get_logger(__name__)


def create_store(params: StorageParams) -> KeyValueStore:
    """Instantiate the configured store backend."""
    if params.backend == "memory":
        return InMemoryStore()
    if params.backend == "sqlite":
        return SqliteKeyValueStore(params.db_path)
    raise ConfigurationError(f"Unsupported storage backend: {params.backend}")


def create_provider(params: ProviderParams) -> FortuneProvider:
    """Instantiate the HTTP fortune provider."""
    return HttpFortuneProvider(params)


class DailyFortuneApp:
    """
    Entry point for hosts embedding the daily fortune lifecycle.

    Typical use::

        app = DailyFortuneApp.from_config_dir()
        await app.start()
        await app.request_fortune()
    """

    def __init__(
        self,
        config: DefaultConfig,
        store: Optional[KeyValueStore] = None,
        provider: Optional[FortuneProvider] = None,
        clock: Clock = now_utc,
    ) -> None:
        self.config = config
        self.logger = logger

        self.store = store or create_store(config.storage)
        self.provider = provider or create_provider(config.provider)

        self.manager = DailyFortuneManager(
            self.store,
            self.provider,
            fortune_key=config.storage.fortune_key,
            date_key=config.storage.date_key,
            client_id=config.provider.client_id,
            calendar_day=make_calendar_day(config.time.timezone),
            clock=clock,
        )

        self.logger.info(
            "Daily fortune app initialized",
            store=type(self.store).__name__,
            provider=type(self.provider).__name__,
            timezone=config.time.timezone or "local"
        )

    @classmethod
    def from_config_dir(
        cls,
        config_dir: Optional[Union[str, Path]] = None,
        overrides: Optional[dict[str, Any]] = None,
        setup_logging: bool = True,
        **kwargs: Any,
    ) -> "DailyFortuneApp":
        """Load fortune.yaml from ``config_dir`` and build the app."""
        config = ConfigLoader.create(Path(config_dir) if config_dir else None).build(overrides)

        if setup_logging:
            configure_logging(
                level=config.logging.level,
                format_json=config.logging.format_json
            )

        return cls(config, **kwargs)

    @property
    def state(self) -> LifecycleState:
        return self.manager.state

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        return self.manager.subscribe(callback)

    async def start(self) -> LifecycleState:
        """Reconcile with the store; call once at startup and on resume."""
        return await self.manager.reconcile()

    async def request_fortune(self) -> GenerationResult:
        """Handle the user's request for today's fortune."""
        return await self.manager.generate()
