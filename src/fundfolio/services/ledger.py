"""Session-owned portfolio ledger: wallet balance and fund holdings."""

import logging
import threading
import uuid
from dataclasses import replace
from decimal import Decimal
from typing import Callable, Optional

from fundfolio.core.exceptions import StoreError
from fundfolio.core.money import ZERO, Number, round_money, round_nav, to_decimal
from fundfolio.core.timezone import now_ist
from fundfolio.domain.models import (
    Fund,
    Holding,
    IntentStatus,
    TradeIntent,
    TradeKind,
)
from fundfolio.domain.views import LedgerErrorKind, LedgerResult
from fundfolio.repositories.protocols import (
    HoldingRepository,
    IntentRepository,
    WalletRepository,
)

logger = logging.getLogger(__name__)

MAX_UNIT_PLACES = 8

# Largest wallet balance and holding size the record store keeps exactly
MAX_BALANCE = Decimal("10000000000000")
MAX_UNITS = Decimal("10000000")


class Ledger:
    """
    In-memory mirror of one user's wallet and portfolio.

    Owned by a single sign-in session: built and loaded on sign-in, closed on
    sign-out. Every mutation is written to the record store first, as a
    sequence of independent writes framed by a durable trade intent, and
    mirrored into memory only after all writes succeeded. Operations on one
    ledger are serialized by a per-ledger lock.

    Buy/sell write order: intent, wallet, holding, intent status. A failed
    wallet write marks the intent FAILED. When the holding write fails, the
    wallet is restored to its before-state with an absolute write. If that
    restore fails too, the intent stays PENDING and is resolved by recovery
    before the next operation or on the next load.
    """

    def __init__(
        self,
        user_id: str,
        wallet_repo: WalletRepository,
        holding_repo: HoldingRepository,
        intent_repo: IntentRepository,
        on_close: Optional[Callable[[], None]] = None,
    ):
        self._user_id = user_id
        self._wallets = wallet_repo
        self._holdings = holding_repo
        self._intents = intent_repo
        self._on_close = on_close
        self._lock = threading.Lock()
        self._balance = ZERO
        self._portfolio: dict[str, Holding] = {}
        self._closed = False

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def is_open(self) -> bool:
        return not self._closed

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def load(self) -> None:
        """
        Resolve pending intents and read wallet and holdings from the store.

        Raises StoreError if the store cannot be read.
        """
        with self._lock:
            self._recover_pending()
            self._reload()

    def close(self) -> None:
        """Discard in-memory state; later operations report UNAUTHENTICATED."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._balance = ZERO
            self._portfolio = {}
        if self._on_close:
            self._on_close()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_wallet_balance(self) -> Decimal:
        return self._balance

    def get_portfolio(self) -> dict[str, Holding]:
        """Return a copy of the portfolio keyed by fund ID."""
        with self._lock:
            return {fund_id: replace(h) for fund_id, h in self._portfolio.items()}

    def get_holding(self, fund_id: str) -> Optional[Holding]:
        holding = self._portfolio.get(fund_id)
        return replace(holding) if holding else None

    def list_activity(self, limit: int = 50) -> list[TradeIntent]:
        """Recent operations of this user, newest first."""
        with self._lock:
            if self._closed:
                return []
            return self._intents.list_by_user(self._user_id, limit=limit)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def buy(self, fund: Fund, units: Number) -> LedgerResult:
        """
        Buy ``units`` of ``fund`` at its current NAV, paid from the wallet.

        A repeat purchase keeps one holding and moves its purchase NAV to the
        quantity-weighted average of the old and new prices.
        """
        with self._lock:
            qty, rejected = self._check_units(units)
            if rejected:
                return rejected
            if fund.nav <= ZERO:
                return LedgerResult.failure(
                    LedgerErrorKind.VALIDATION, f"Fund {fund.fund_id} has no valid NAV"
                )
            rejected = self._recover_or_fail()
            if rejected:
                return rejected

            cost = round_money(qty * fund.nav)
            if cost > self._balance:
                return LedgerResult.failure(
                    LedgerErrorKind.INSUFFICIENT_FUNDS,
                    f"Insufficient balance. Required: ₹{cost}, Available: ₹{self._balance}",
                )

            current = self._portfolio.get(fund.fund_id)
            if current:
                new_units = current.units + qty
                new_nav = round_nav((current.cost_basis + qty * fund.nav) / new_units)
            else:
                new_units = qty
                new_nav = round_nav(fund.nav)
            if new_units > MAX_UNITS:
                return _too_many_units()
            after = Holding(
                user_id=self._user_id,
                fund_id=fund.fund_id,
                units=new_units,
                purchase_nav=new_nav,
            )

            intent = self._new_intent(
                TradeKind.BUY,
                amount=cost,
                wallet_after=self._balance - cost,
                fund=fund,
                units=qty,
                before=current,
                after=after,
            )
            if not self._execute(intent, current, after):
                return LedgerResult.failure(
                    LedgerErrorKind.STORE_FAILURE,
                    f"Could not complete purchase of {fund.name}; no money was taken",
                )

            self._balance = intent.wallet_after
            self._portfolio[fund.fund_id] = after
            logger.info("User %s bought %s units of %s for %s", self._user_id, qty, fund.fund_id, cost)
            return LedgerResult.success(
                f"Bought {qty} units of {fund.name}",
                wallet_balance=self._balance,
                holding=replace(after),
            )

    def sell(self, fund: Fund, units: Number) -> LedgerResult:
        """
        Sell ``units`` of ``fund`` at its current NAV, credited to the wallet.

        The holding is deleted when no units remain; otherwise its purchase
        NAV is unchanged.
        """
        with self._lock:
            qty, rejected = self._check_units(units)
            if rejected:
                return rejected
            if fund.nav <= ZERO:
                return LedgerResult.failure(
                    LedgerErrorKind.VALIDATION, f"Fund {fund.fund_id} has no valid NAV"
                )
            rejected = self._recover_or_fail()
            if rejected:
                return rejected

            current = self._portfolio.get(fund.fund_id)
            available = current.units if current else ZERO
            if current is None or available < qty:
                return LedgerResult.failure(
                    LedgerErrorKind.INSUFFICIENT_UNITS,
                    f"Not enough units to sell. Available: {available}",
                )

            sale_value = round_money(qty * fund.nav)
            if self._balance + sale_value > MAX_BALANCE:
                return _balance_limit()
            remaining = current.units - qty
            after = None
            if remaining > ZERO:
                after = replace(current, units=remaining, updated_at=None)

            intent = self._new_intent(
                TradeKind.SELL,
                amount=sale_value,
                wallet_after=self._balance + sale_value,
                fund=fund,
                units=qty,
                before=current,
                after=after,
            )
            if not self._execute(intent, current, after):
                return LedgerResult.failure(
                    LedgerErrorKind.STORE_FAILURE,
                    f"Could not complete sale of {fund.name}; your holding is unchanged",
                )

            self._balance = intent.wallet_after
            if after is None:
                del self._portfolio[fund.fund_id]
            else:
                self._portfolio[fund.fund_id] = after
            logger.info(
                "User %s sold %s units of %s for %s", self._user_id, qty, fund.fund_id, sale_value
            )
            return LedgerResult.success(
                f"Sold {qty} units of {fund.name}",
                wallet_balance=self._balance,
                holding=replace(after) if after else None,
            )

    def deposit(self, amount: Number) -> LedgerResult:
        """Add money to the wallet. Single write, no compensation needed."""
        with self._lock:
            if self._closed:
                return _unauthenticated()
            value = to_decimal(amount)
            if value is not None and value > MAX_BALANCE:
                return _balance_limit()
            if value is None or round_money(value) <= ZERO:
                return LedgerResult.failure(
                    LedgerErrorKind.VALIDATION,
                    "Please enter a valid amount greater than 0",
                )
            value = round_money(value)
            rejected = self._recover_or_fail()
            if rejected:
                return rejected
            if self._balance + value > MAX_BALANCE:
                return _balance_limit()

            intent = self._new_intent(
                TradeKind.DEPOSIT,
                amount=value,
                wallet_after=self._balance + value,
            )
            if not self._execute(intent, None, None):
                return LedgerResult.failure(
                    LedgerErrorKind.STORE_FAILURE, "Could not add money to your wallet"
                )

            self._balance = intent.wallet_after
            logger.info("User %s deposited %s", self._user_id, value)
            return LedgerResult.success(
                f"₹{value} has been added to your wallet",
                wallet_balance=self._balance,
            )

    # ------------------------------------------------------------------
    # Store writes
    # ------------------------------------------------------------------

    def _execute(
        self,
        intent: TradeIntent,
        before: Optional[Holding],
        after: Optional[Holding],
    ) -> bool:
        """Apply an intent's writes in order; restore the before-state on failure."""
        try:
            self._intents.create(intent)
        except StoreError:
            return False

        try:
            self._wallets.set_balance(self._user_id, intent.wallet_after)
        except StoreError:
            # Rolled back by the store; nothing was applied.
            self._mark(intent, IntentStatus.FAILED)
            return False

        if intent.touches_holding:
            try:
                self._write_holding(intent.fund_id, before, after)
            except StoreError as exc:
                logger.warning("Intent %s failed mid-way (%s); compensating", intent.intent_id, exc)
                self._compensate(intent)
                return False

        # If this fails, recovery finds the after-state and rolls forward.
        self._mark(intent, IntentStatus.COMPLETED)
        return True

    def _mark(self, intent: TradeIntent, status: IntentStatus) -> None:
        try:
            self._intents.set_status(intent.intent_id, status)
        except StoreError:
            logger.warning("Could not mark intent %s %s", intent.intent_id, status.value)

    def _compensate(self, intent: TradeIntent) -> None:
        """Best-effort restore; leaves the intent PENDING if the restore fails."""
        try:
            self._restore_before(intent)
            self._intents.set_status(intent.intent_id, IntentStatus.COMPENSATED)
        except StoreError:
            logger.error(
                "Compensation for intent %s failed; left pending for recovery",
                intent.intent_id,
            )

    def _restore_before(self, intent: TradeIntent) -> None:
        self._wallets.set_balance(self._user_id, intent.wallet_before)
        if intent.touches_holding:
            existing = self._holdings.get(self._user_id, intent.fund_id)
            self._write_holding(intent.fund_id, existing, _holding_before(intent))

    def _write_holding(
        self,
        fund_id: str,
        existing: Optional[Holding],
        target: Optional[Holding],
    ) -> None:
        """Make the stored holding row equal ``target`` (None deletes it)."""
        if target is None:
            self._holdings.delete(self._user_id, fund_id)
        elif existing is None:
            self._holdings.insert(target)
        else:
            self._holdings.update(target)

    # ------------------------------------------------------------------
    # Recovery
    # ------------------------------------------------------------------

    def _recover_or_fail(self) -> Optional[LedgerResult]:
        if self._closed:
            return _unauthenticated()
        try:
            self._recover_pending()
        except StoreError:
            return LedgerResult.failure(
                LedgerErrorKind.STORE_FAILURE,
                "Could not reconcile an earlier unfinished operation; please retry",
            )
        return None

    def _recover_pending(self) -> None:
        """
        Finish or undo every PENDING intent, oldest first.

        An intent whose after-state is already in the store is marked
        COMPLETED; any other is rolled back to its before-state.
        """
        pending = self._intents.list_pending(self._user_id)
        if not pending:
            return

        for intent in pending:
            if self._store_matches_after(intent):
                self._intents.set_status(intent.intent_id, IntentStatus.COMPLETED)
                logger.info("Recovered intent %s: rolled forward", intent.intent_id)
            else:
                self._restore_before(intent)
                self._intents.set_status(intent.intent_id, IntentStatus.COMPENSATED)
                logger.info("Recovered intent %s: rolled back", intent.intent_id)

        self._reload()

    def _store_matches_after(self, intent: TradeIntent) -> bool:
        wallet = self._wallets.get(self._user_id)
        balance = wallet.balance if wallet else ZERO
        if balance != intent.wallet_after:
            return False
        if not intent.touches_holding:
            return True
        holding = self._holdings.get(self._user_id, intent.fund_id)
        if intent.units_after is None:
            return holding is None
        return (
            holding is not None
            and holding.units == intent.units_after
            and holding.purchase_nav == intent.purchase_nav_after
        )

    def _reload(self) -> None:
        wallet = self._wallets.get(self._user_id)
        self._balance = wallet.balance if wallet else ZERO
        self._portfolio = {
            h.fund_id: h
            for h in self._holdings.list_by_user(self._user_id)
            if h.units > ZERO
        }

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_units(self, units: Number) -> tuple[Decimal, Optional[LedgerResult]]:
        if self._closed:
            return ZERO, _unauthenticated()
        qty = to_decimal(units)
        if qty is None or qty <= ZERO:
            return ZERO, LedgerResult.failure(
                LedgerErrorKind.VALIDATION, "Units must be a number greater than 0"
            )
        if qty.as_tuple().exponent < -MAX_UNIT_PLACES:
            return ZERO, LedgerResult.failure(
                LedgerErrorKind.VALIDATION,
                f"Units support at most {MAX_UNIT_PLACES} decimal places",
            )
        if qty > MAX_UNITS:
            return ZERO, _too_many_units()
        return qty, None

    def _new_intent(
        self,
        kind: TradeKind,
        amount: Decimal,
        wallet_after: Decimal,
        fund: Optional[Fund] = None,
        units: Optional[Decimal] = None,
        before: Optional[Holding] = None,
        after: Optional[Holding] = None,
    ) -> TradeIntent:
        return TradeIntent(
            intent_id=str(uuid.uuid4()),
            user_id=self._user_id,
            kind=kind,
            wallet_before=self._balance,
            wallet_after=wallet_after,
            amount=amount,
            fund_id=fund.fund_id if fund else None,
            units=units,
            nav=fund.nav if fund else None,
            units_before=before.units if before else None,
            purchase_nav_before=before.purchase_nav if before else None,
            units_after=after.units if after else None,
            purchase_nav_after=after.purchase_nav if after else None,
            status=IntentStatus.PENDING,
            created_at=now_ist(),
        )


def _holding_before(intent: TradeIntent) -> Optional[Holding]:
    if intent.units_before is None:
        return None
    return Holding(
        user_id=intent.user_id,
        fund_id=intent.fund_id,
        units=intent.units_before,
        purchase_nav=intent.purchase_nav_before,
    )


def _unauthenticated() -> LedgerResult:
    return LedgerResult.failure(
        LedgerErrorKind.UNAUTHENTICATED, "Please sign in to continue"
    )


def _balance_limit() -> LedgerResult:
    return LedgerResult.failure(
        LedgerErrorKind.VALIDATION, f"Wallet balance cannot exceed ₹{MAX_BALANCE}"
    )


def _too_many_units() -> LedgerResult:
    return LedgerResult.failure(
        LedgerErrorKind.VALIDATION, f"A holding cannot exceed {MAX_UNITS} units"
    )
