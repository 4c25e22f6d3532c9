"""Pydantic schemas for wallet endpoints."""

from decimal import Decimal

from pydantic import BaseModel, Field


class DepositRequest(BaseModel):
    """Request schema for adding money to the wallet."""

    amount: Decimal = Field(..., description="Amount in rupees, must be greater than 0")


class WalletResponse(BaseModel):
    balance: Decimal
