"""
Application Session for Golden Tiger

This module ties the components together for one app session:
- which route the app opens on (onboarding or the tabs)
- completing onboarding
- the global "Reset All Data" wipe
- summaries the screens display

DESIGN DECISION: The session owns the key-value store, the record store
and the audit logger, so a global wipe can clear storage and drop every
cached collection in one place.
"""

from pathlib import Path
from typing import Optional

from golden_tiger.audit import AuditLogger, configure_logging
from golden_tiger.config import get_settings
from golden_tiger.models.records import (
    GOALS_KEY,
    PORTFOLIO_KEY,
    SIMULATIONS_KEY,
)
from golden_tiger.queries import (
    GoalProgress,
    PortfolioSummary,
    goal_progress,
    recent_simulations,
    summarize_portfolio,
)
from golden_tiger.services.storage import (
    JsonFileKeyValueStore,
    KeyValueStoreInterface,
    StorageError,
)
from golden_tiger.store import RecordStore


ONBOARDING_KEY = "onboardingComplete"

ROUTE_ONBOARDING = "onboarding"
ROUTE_TABS = "tabs"


class AppSession:
    """
    One running instance of the app.

    Screens get their data through session.records and the summary
    helpers; settings screens call reset_all_data.
    """

    def __init__(
        self,
        storage: KeyValueStoreInterface,
        records: Optional[RecordStore] = None,
        audit_logger: Optional[AuditLogger] = None,
        recent_simulations_limit: int = 5,
    ):
        self._storage = storage
        self._audit_logger = audit_logger or AuditLogger()
        self.records = records or RecordStore(storage, audit_logger=self._audit_logger)
        self._recent_simulations_limit = recent_simulations_limit

    async def is_onboarding_complete(self) -> bool:
        """Read once at start-up. Unreadable storage counts as not onboarded."""
        try:
            return bool(await self._storage.get(ONBOARDING_KEY))
        except StorageError as e:
            self._audit_logger.log_load_failed(ONBOARDING_KEY, str(e))
            return False

    async def initial_route(self) -> str:
        if await self.is_onboarding_complete():
            return ROUTE_TABS
        return ROUTE_ONBOARDING

    async def complete_onboarding(self) -> bool:
        """Set the onboarding flag. Returns False if it could not be saved."""
        try:
            await self._storage.set(ONBOARDING_KEY, True)
        except StorageError as e:
            self._audit_logger.log_persist_failed(ONBOARDING_KEY, str(e), record_count=0)
            return False
        self._audit_logger.log_onboarding_completed()
        return True

    async def reset_all_data(self) -> bool:
        """
        Delete every slot, onboarding flag included, in one storage call.

        Cached collections are dropped either way, so the next read
        reflects whatever storage actually holds.
        """
        try:
            await self._storage.clear()
        except StorageError as e:
            self._audit_logger.log_reset_failed(str(e))
            return False
        finally:
            self.records.invalidate()

        self._audit_logger.log_store_cleared()
        return True

    async def portfolio_summary(self) -> PortfolioSummary:
        return summarize_portfolio(await self.records.records(PORTFOLIO_KEY))

    async def goal_progress(self) -> list[GoalProgress]:
        return goal_progress(await self.records.records(GOALS_KEY))

    async def recent_simulations(self):
        return recent_simulations(
            await self.records.records(SIMULATIONS_KEY),
            limit=self._recent_simulations_limit,
        )


def create_app_components(
    data_dir: Optional[Path] = None,
    storage: Optional[KeyValueStoreInterface] = None,
) -> AppSession:
    """
    Factory function to create a session from settings.

    Args:
        data_dir: Override the configured data directory.
        storage: Use this store instead of the JSON file store
                 (e.g. InMemoryKeyValueStore in tests).
    """
    settings = get_settings()
    app_settings = settings.app

    configure_logging(app_settings.log_level, app_settings.log_format)
    audit_logger = AuditLogger()

    if storage is None:
        storage_settings = settings.storage
        storage = JsonFileKeyValueStore(
            data_dir=data_dir or storage_settings.data_dir,
            write_retry_attempts=storage_settings.write_retry_attempts,
        )

    records = RecordStore(
        storage,
        audit_logger=audit_logger,
        scenario_fallback=app_settings.scenario_fallback,
    )

    return AppSession(
        storage,
        records=records,
        audit_logger=audit_logger,
        recent_simulations_limit=app_settings.recent_simulations_limit,
    )
