from utils.arg_parser import get_args
from utils.helper import *
from utils.classes import RateRecord, RateAreaStatus
from utils.exceptions import SlcspError, RateParseError
from utils.validation import validate_output
from utils.logger import get_logger, set_level


# Import Packages
import sys
from collections import defaultdict
from typing import List, Dict, Tuple

import pandas as pd

# Logging
logger = get_logger('Main')

# -------------------------------
# Constants
# -------------------------------
from constants import (
    TARGET_METAL_LEVEL,
    SLCSP_COLUMNS,
    ZIPS_COLUMNS,
    PLANS_COLUMNS,
    OUTPUT_COLUMNS
)

LOGGER_NAMES = ['Main', 'Argument Parser', 'Validation']


def load_targets(slcsp_df: pd.DataFrame) -> Tuple[List[str], Dict[str, RateRecord]]:
    """
    Collect the requested zip codes.

    Returns (ordered_zips, records): the zips in input order, duplicates kept,
    and one empty RateRecord per distinct zip. The rate column is ignored.
    """
    ordered_zips: List[str] = slcsp_df["zipcode"].tolist()
    records: Dict[str, RateRecord] = {}
    for zipcode in ordered_zips:
        records.setdefault(zipcode, RateRecord())

    if len(records) != len(ordered_zips):
        logger.info(f"Target list has {len(ordered_zips) - len(records)} repeated zip code(s).")
    logger.info(f"Loaded {len(records)} target zip codes.")
    return ordered_zips, records


def resolve_rate_areas(records: Dict[str, RateRecord], zips_df: pd.DataFrame) -> Dict[str, RateRecord]:
    """
    Attach a rate area to each target zip.

    A zip seen with two different (state, rate_area) pairs is ambiguous and
    stays that way. Rows for zips outside the target list are skipped.
    """
    matched = zips_df[zips_df["zipcode"].isin(list(records))]

    for zipcode, state, code in matched[["zipcode", "state", "rate_area"]].itertuples(index=False):
        record = records[zipcode]
        previous = record.status
        rate_area = build_rate_area(state, code)
        if record.assign_rate_area(rate_area) is RateAreaStatus.AMBIGUOUS and previous is not RateAreaStatus.AMBIGUOUS:
            logger.warning(f"Zip {zipcode} maps to both {record.rate_area} and {rate_area}; no rate will be given.")

    resolved = sum(1 for r in records.values() if r.status is RateAreaStatus.RESOLVED)
    ambiguous = sum(1 for r in records.values() if r.ambiguous)
    logger.info(f"Scanned {len(zips_df)} zip rows: {resolved} target zips resolved, {ambiguous} ambiguous, "
                f"{len(records) - resolved - ambiguous} without a rate area.")
    return records


def aggregate_rates(records: Dict[str, RateRecord], plans_df: pd.DataFrame, source="plans") -> Dict[str, RateRecord]:
    """
    Append each Silver plan's rate to every resolved target zip in the plan's rate area.

    Every row's rate must be a valid number, whatever its metal level;
    the first bad one raises RateParseError.
    """
    rates = []
    for row, value in enumerate(plans_df["rate"], start=1):
        rate = try_decimal(value)
        if rate is None:
            raise RateParseError(source, row, value)
        rates.append(rate)

    # rate area -> zips sharing it; ambiguous and unresolved zips never join
    zips_by_area = defaultdict(list)
    for zipcode, record in records.items():
        if record.status is RateAreaStatus.RESOLVED:
            zips_by_area[record.rate_area].append(zipcode)

    silver_count = 0
    for (state, metal_level, code), rate in zip(plans_df[["state", "metal_level", "rate_area"]].itertuples(index=False), rates):
        if metal_level != TARGET_METAL_LEVEL:
            continue
        silver_count += 1
        rate_area = build_rate_area(state, code)
        for zipcode in zips_by_area.get(rate_area, []):
            records[zipcode].add_rate(rate)
            logger.debug(f"Zip {zipcode} ({rate_area}): added rate {rate}")

    logger.info(f"Scanned {len(plans_df)} plan rows, {silver_count} {TARGET_METAL_LEVEL}.")
    return records


def build_output(ordered_zips: List[str], records: Dict[str, RateRecord]) -> pd.DataFrame:
    rows = []
    for zipcode in ordered_zips:
        rate = select_second_lowest(records[zipcode].rates)
        rows.append({"zipcode": zipcode, "rate": format_rate(rate)})
    output_df = pd.DataFrame(rows, columns=OUTPUT_COLUMNS)

    answered = int((output_df["rate"] != "").sum())
    logger.info(f"Determined SLCSP for {answered} of {len(ordered_zips)} zip codes.")
    return output_df


#------------------------------------------
# Orchestrator
#------------------------------------------
def main(slcsp_path: str, zips_path: str, plans_path: str, out=None) -> pd.DataFrame:
    # Each source is read in full before its stage runs
    ordered_zips, records = load_targets(read_records(slcsp_path, SLCSP_COLUMNS))
    records = resolve_rate_areas(records, read_records(zips_path, ZIPS_COLUMNS))
    records = aggregate_rates(records, read_records(plans_path, PLANS_COLUMNS), source=plans_path)

    output_df = build_output(ordered_zips, records)

    # Validation
    validate_output(ordered_zips, output_df)

    # Write output
    output_df.to_csv(out if out is not None else sys.stdout, index=False, lineterminator="\n")
    if out is not None:
        logger.info(f"Wrote SLCSP rates: {out}")

    return output_df


def cli(argv=None) -> int:
    # Get commandline arguments "input and output filenames"
    args = get_args(argv)
    set_level(LOGGER_NAMES, args.log_level)

    try:
        main(args.slcsp_file, args.zips_file, args.plans_file, args.output_file)
    except (SlcspError, RuntimeError) as e:
        logger.critical(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(cli())
