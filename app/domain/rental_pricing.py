from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta


@dataclass(frozen=True, slots=True)
class RentalReturnPolicy:
    """Defines how a rental is priced when it comes back "as of" a given date.

    Semantics (intentionally centralized):
    - The rental is due on rent_date + days_rented days
    - Each whole day past the due date costs the daily rate,
      where daily rate = original_price / days_rented
    - Returning on or before the due date costs nothing extra (no early-return discount)
    """

    as_of: date

    @staticmethod
    def original_price(*, price_per_day: int, days_rented: int) -> int:
        return price_per_day * days_rented

    @staticmethod
    def expected_return_date(*, rent_date: date, days_rented: int) -> date:
        return rent_date + timedelta(days=days_rented)

    def late_days(self, *, rent_date: date, days_rented: int) -> int:
        expected = self.expected_return_date(rent_date=rent_date, days_rented=days_rented)
        return max(0, (self.as_of - expected).days)

    def delay_fee(
        self, *, rent_date: date, days_rented: int, original_price: int
    ) -> int | None:
        """Return the late fee, or None when the rental is returned on time."""
        late = self.late_days(rent_date=rent_date, days_rented=days_rented)
        if late == 0:
            return None
        # original_price is price_per_day * days_rented, so this division is exact
        daily_rate = original_price // days_rented
        return daily_rate * late
