"""Transfer use cases."""

from .transfer_funds import (
    TransferFundsRequest,
    TransferFundsResponse,
    TransferFundsUseCase,
)

__all__ = [
    "TransferFundsRequest",
    "TransferFundsResponse",
    "TransferFundsUseCase",
]
