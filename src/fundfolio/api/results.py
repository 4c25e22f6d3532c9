"""Translate ledger results into HTTP responses."""

from fundfolio.api.schemas import HoldingResponse, OperationResponse
from fundfolio.core.exceptions import (
    AppError,
    InsufficientFundsError,
    InsufficientUnitsError,
    StoreError,
    UnauthenticatedError,
    ValidationError,
)
from fundfolio.domain.views import LedgerErrorKind, LedgerResult

_ERRORS: dict[LedgerErrorKind, type[AppError]] = {
    LedgerErrorKind.VALIDATION: ValidationError,
    LedgerErrorKind.INSUFFICIENT_FUNDS: InsufficientFundsError,
    LedgerErrorKind.INSUFFICIENT_UNITS: InsufficientUnitsError,
    LedgerErrorKind.UNAUTHENTICATED: UnauthenticatedError,
    LedgerErrorKind.STORE_FAILURE: StoreError,
}


def to_operation_response(result: LedgerResult) -> OperationResponse:
    """Return the response for a successful result; raise the mapped AppError otherwise."""
    if not result:
        raise _ERRORS[result.error](result.message)
    holding = None
    if result.holding is not None:
        holding = HoldingResponse.model_validate(result.holding)
    return OperationResponse(
        message=result.message,
        wallet_balance=result.wallet_balance,
        holding=holding,
    )
