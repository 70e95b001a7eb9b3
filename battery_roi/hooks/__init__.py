"""Hook modules for audit logging."""

from .audit_hooks import log_calculation, log_sanity_check

__all__ = ["log_calculation", "log_sanity_check"]
