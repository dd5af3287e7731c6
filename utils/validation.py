from utils.logger import get_logger

from typing import List

import pandas as pd

from constants import (
    OUTPUT_COLUMNS,
    RATE_OUTPUT_RE
)

# Logging
logger = get_logger('Validation')

def validate_output(ordered_zips: List[str], output_df: pd.DataFrame) -> None:
    """
    Check the output frame before it is written. Raise RuntimeError on hard failures.
    """
    if list(output_df.columns) != OUTPUT_COLUMNS:
        raise RuntimeError(f"Output columns {list(output_df.columns)} do not match {OUTPUT_COLUMNS}")

    # One row per target zip, in input order (duplicates included)
    if len(output_df) != len(ordered_zips):
        raise RuntimeError(f"Output has {len(output_df)} rows, expected {len(ordered_zips)}")
    mismatched = [
        (i, expected, actual)
        for i, (expected, actual) in enumerate(zip(ordered_zips, output_df["zipcode"]))
        if expected != actual
    ]
    if mismatched:
        raise RuntimeError(f"Output zip order differs from the target list: {mismatched[:5]}")

    bad_rates = [r for r in output_df["rate"] if not isinstance(r, str) or not RATE_OUTPUT_RE.match(r)]
    if bad_rates:
        raise RuntimeError(f"Invalid rate values in output: {bad_rates[:5]}")

    logger.info("Validation passed.")
