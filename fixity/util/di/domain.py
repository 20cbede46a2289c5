"""Domain layer DI providers."""

from dishka import Scope, provide

from fixity.config import Settings
from fixity.domain.service import AuditService, TransferService
from fixity.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped; each request container gets fresh
    service instances.
    """

    scope = Scope.REQUEST

    @provide
    def get_transfer_service(self, settings: Settings) -> TransferService:
        """Provide transfer domain service."""
        return TransferService(transfer_settings=settings.transfers)

    @provide
    def get_audit_service(self, settings: Settings) -> AuditService:
        """Provide immutability audit domain service."""
        return AuditService(audit_settings=settings.audit)
