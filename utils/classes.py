from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import List, Optional


@dataclass(frozen=True, order=True)
class RateArea:
    """
    Join key shared by zips.csv and plans.csv, e.g. ('KS', '2') -> KS2.
    """
    state: str
    code: str

    def __str__(self) -> str:
        return f"{self.state}{self.code}"


class RateAreaStatus(Enum):
    UNSET = "unset"
    RESOLVED = "resolved"
    AMBIGUOUS = "ambiguous"  # terminal


@dataclass
class RateRecord:
    rate_area: Optional[RateArea] = None
    rates: List[Decimal] = field(default_factory=list)
    status: RateAreaStatus = RateAreaStatus.UNSET

    @property
    def ambiguous(self) -> bool:
        return self.status is RateAreaStatus.AMBIGUOUS

    def assign_rate_area(self, rate_area: RateArea) -> RateAreaStatus:
        """
        Record an observed rate area for this zip.

        The first observation resolves the zip; a later, different one makes
        it ambiguous for good. Repeats of the recorded area change nothing.
        """
        if self.status is RateAreaStatus.UNSET:
            self.rate_area = rate_area
            self.status = RateAreaStatus.RESOLVED
        elif self.status is RateAreaStatus.RESOLVED and rate_area != self.rate_area:
            self.status = RateAreaStatus.AMBIGUOUS
        return self.status

    def add_rate(self, rate: Decimal) -> bool:
        if self.status is not RateAreaStatus.RESOLVED:
            return False
        self.rates.append(rate)
        return True
