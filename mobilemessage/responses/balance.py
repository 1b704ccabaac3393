from __future__ import annotations

from typing import Optional

from mobilemessage.types import BalanceRecord

from .base import BaseResponse


class BalanceResponse(BaseResponse):
    """Result of GET /account."""

    @property
    def balance(self) -> float:
        return self.contract.balance(self._raw)

    credit_balance = balance

    @property
    def currency(self) -> str:
        return self.contract.currency(self._raw)

    @property
    def account_name(self) -> Optional[str]:
        return self.get("account_name")

    def is_low_balance(self, threshold: float = 10) -> bool:
        """True when the balance is strictly below `threshold`."""
        return self.balance < threshold

    @property
    def formatted_balance(self) -> str:
        return self.contract.format_balance(self.balance, self.currency)

    @property
    def record(self) -> BalanceRecord:
        return BalanceRecord(
            balance=self.balance, currency=self.currency, account_name=self.account_name
        )
