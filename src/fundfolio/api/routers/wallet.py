"""Wallet endpoints."""

from fastapi import APIRouter, Depends

from fundfolio.api.deps import get_current_ledger
from fundfolio.api.results import to_operation_response
from fundfolio.api.schemas import DepositRequest, OperationResponse, WalletResponse
from fundfolio.services import Ledger

router = APIRouter(prefix="/wallet", tags=["wallet"])


@router.get("", response_model=WalletResponse)
def get_wallet(ledger: Ledger = Depends(get_current_ledger)):
    return WalletResponse(balance=ledger.get_wallet_balance())


@router.post("/deposit", response_model=OperationResponse)
def deposit(data: DepositRequest, ledger: Ledger = Depends(get_current_ledger)):
    """Add money to the wallet."""
    return to_operation_response(ledger.deposit(data.amount))
