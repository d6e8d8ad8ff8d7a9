"""
Audit Logger

DESIGN DECISION: Every mutation, and every storage failure the record
store swallows, is logged. This provides:
1. A record of changes the screen showed but storage never received
2. Debugging capability for corrupted slots
3. A single diagnostic channel for the whole core

The audit logger:
- Never raises (logging must not break a save)
- Picks the log level from the event severity
"""

import logging
from typing import Optional

import structlog

from golden_tiger.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


_SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def _configure_structlog(renderer) -> None:
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Uncached, so configure_logging also reaches AuditLoggers made earlier
        cache_logger_on_first_use=False,
    )


# Configure structlog for local logging
_configure_structlog(structlog.processors.JSONRenderer())


def configure_logging(level: str = "INFO", log_format: str = "json") -> None:
    """
    Route log lines to stderr at the given level.

    log_format "json" renders one JSON object per line; "console"
    renders for a developer terminal. Called once by the app session
    factory; library use alone never touches the root logger.
    """
    logging.basicConfig(format="%(message)s", level=level.upper())
    logging.getLogger("golden_tiger").setLevel(level.upper())

    renderer = (
        structlog.dev.ConsoleRenderer()
        if log_format == "console"
        else structlog.processors.JSONRenderer()
    )
    _configure_structlog(renderer)


class AuditLogger:
    """
    Central audit logging service.

    Logs typed AuditEvents as structured lines under the
    "golden_tiger.audit" logger.
    """

    def __init__(self, logger_name: str = "golden_tiger.audit"):
        self._logger = structlog.get_logger(logger_name)

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Returns False if the logging backend itself failed.
        """
        log_dict = event.to_log_dict()
        # event_type is the log line's event name; structlog stamps its own time
        name = log_dict.pop("event_type")
        log_dict.pop("timestamp")

        try:
            if event.severity == AuditSeverity.ERROR:
                self._logger.error(name, **log_dict)
            elif event.severity == AuditSeverity.WARNING:
                self._logger.warning(name, **log_dict)
            elif event.severity == AuditSeverity.DEBUG:
                self._logger.debug(name, **log_dict)
            else:
                self._logger.info(name, **log_dict)
        except Exception:
            return False

        return True

    def log_record_created(self, collection: str, record_id: str) -> None:
        self.log(AuditEventBuilder.record_created(collection, record_id))

    def log_record_updated(self, collection: str, record_id: str) -> None:
        self.log(AuditEventBuilder.record_updated(collection, record_id))

    def log_record_deleted(self, collection: str, record_id: str) -> None:
        self.log(AuditEventBuilder.record_deleted(collection, record_id))

    def log_record_not_found(
        self,
        collection: str,
        record_id: str,
        operation: str,
    ) -> None:
        self.log(AuditEventBuilder.record_not_found(collection, record_id, operation))

    def log_validation_failed(
        self,
        collection: str,
        issues: list[dict],
        record_id: Optional[str] = None,
    ) -> None:
        self.log(AuditEventBuilder.validation_failed(collection, issues, record_id))

    def log_collection_loaded(self, collection: str, count: int) -> None:
        self.log(AuditEventBuilder.collection_loaded(collection, count))

    def log_load_failed(self, collection: str, error_message: str) -> None:
        self.log(AuditEventBuilder.load_failed(collection, error_message))

    def log_persist_failed(
        self,
        collection: str,
        error_message: str,
        record_count: int,
    ) -> None:
        self.log(AuditEventBuilder.persist_failed(collection, error_message, record_count))

    def log_store_cleared(self) -> None:
        self.log(AuditEventBuilder.store_cleared())

    def log_reset_failed(self, error_message: str) -> None:
        self.log(AuditEventBuilder.reset_failed(error_message))

    def log_onboarding_completed(self) -> None:
        self.log(AuditEventBuilder.onboarding_completed())
