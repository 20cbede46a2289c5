"""Application layer DI providers."""

from dishka import Scope, provide

from fixity.application.usecase.transfer import TransferFundsUseCase
from fixity.domain.service import TransferService
from fixity.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_transfer_funds_use_case(
        self, transfer_service: TransferService
    ) -> TransferFundsUseCase:
        """Provide transfer funds use case."""
        return TransferFundsUseCase(transfer_service=transfer_service)
