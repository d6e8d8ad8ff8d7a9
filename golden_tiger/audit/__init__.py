"""Audit logging package."""

from golden_tiger.audit.logger import AuditLogger, configure_logging

__all__ = ["AuditLogger", "configure_logging"]
