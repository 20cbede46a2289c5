"""Domain services."""

from .audit_service import AuditReport, AuditService
from .base import Service
from .transfer_service import TransferService

__all__ = [
    "AuditReport",
    "AuditService",
    "Service",
    "TransferService",
]
