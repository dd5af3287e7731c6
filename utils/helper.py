from typing import List, Optional, Any
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from constants import (
    RATE_DECIMALS
)
from utils.classes import RateArea
from utils.exceptions import SourceReadError

import pandas as pd



def read_records(path, columns: List[str]) -> pd.DataFrame:
    """
    Read a headed CSV into a frame of text fields labelled with `columns`.

    Every row, header included, must carry exactly len(columns) fields.
    Empty fields stay as "" rather than NaN; NaN only marks fields missing
    from a short row.
    """
    try:
        df = pd.read_csv(
            path,
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            engine="python",
        )
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise SourceReadError(path, e) from e

    expected = len(columns)
    if df.shape[1] != expected:
        raise SourceReadError(path, f"expected {expected} fields per row, header has {df.shape[1]}")

    short_rows = df.isna().any(axis=1)
    if short_rows.any():
        row = int(short_rows.idxmax())  # header is row 0
        raise SourceReadError(path, f"expected {expected} fields per row, row {row} has fewer")

    df = df.iloc[1:].reset_index(drop=True)
    df.columns = columns
    return df


def build_rate_area(state: str, code: str) -> RateArea:
    """
    Rate area key for a (state, rate_area) pair, e.g. ('KS', '2') -> KS2.
    """
    return RateArea(state, code)


def try_decimal(x: Any) -> Optional[Decimal]:
    try:
        if x is None:
            return None
        # surrounding spaces and digit underscores are not part of a rate
        if isinstance(x, str) and (x != x.strip() or "_" in x):
            return None
        value = Decimal(x)
    except (InvalidOperation, TypeError, ValueError):
        return None
    if not value.is_finite():
        return None
    return value


def select_second_lowest(rates: List[Decimal]) -> Optional[Decimal]:
    """
    Second entry of the ascending rates, counting ties by position:
    [198.25, 207.60, 207.60] -> 207.60, [207.60, 207.60] -> 207.60.
    """
    if len(rates) < 2:
        return None
    return sorted(rates)[1]


def format_rate(rate: Optional[Decimal]) -> str:
    if rate is None:
        return ""
    quantum = Decimal(1).scaleb(-RATE_DECIMALS)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, rate.adjusted() + RATE_DECIMALS + 2)
        return str(rate.quantize(quantum, rounding=ROUND_HALF_UP))
