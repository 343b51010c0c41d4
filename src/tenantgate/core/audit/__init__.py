"""Audit logging - append-only records of administrative actions."""

from tenantgate.core.audit.models import AuditLog
from tenantgate.core.audit.service import AuditContext, AuditService, AuditSvc


__all__ = [
    "AuditContext",
    "AuditLog",
    "AuditService",
    "AuditSvc",
]
