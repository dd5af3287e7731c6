import argparse
from utils.logger import get_logger

from constants import (
    SLCSP_FILE_NAME,
    ZIPS_FILE_NAME,
    PLANS_FILE_NAME
)

#Initialize logger
logger = get_logger('Argument Parser')

def get_args(argv=None):
    parser = argparse.ArgumentParser(description="Find the second lowest cost silver plan (SLCSP) rate for each zip code")

    # Define arguments
    parser.add_argument("--slcsp", dest="slcsp_file", default=SLCSP_FILE_NAME, help="Path to the target zip code CSV")
    parser.add_argument("--zips", dest="zips_file", default=ZIPS_FILE_NAME, help="Path to the zip code to rate area CSV")
    parser.add_argument("--plans", dest="plans_file", default=PLANS_FILE_NAME, help="Path to the health plan CSV")
    parser.add_argument("--out", dest="output_file", default=None, help="Path to output CSV (default: stdout)")
    parser.add_argument("--log-level", dest="log_level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], type=str.upper,
                        help="Logging verbosity (default: INFO)")

    args = parser.parse_args(argv)
    logger.setLevel(args.log_level)

    logger.info(f"Target zip file: {args.slcsp_file}")
    logger.info(f"Zip code file: {args.zips_file}")
    logger.info(f"Plan file: {args.plans_file}")
    logger.info(f"Output file: {args.output_file or '<stdout>'}")

    return args
