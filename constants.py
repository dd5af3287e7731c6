"""
Constants used across the SLCSP rate lookup scripts.
"""

import re

# Default input files (looked up in the working directory)
SLCSP_FILE_NAME = "slcsp.csv"
ZIPS_FILE_NAME = "zips.csv"
PLANS_FILE_NAME = "plans.csv"

# Only plans of this metal level count toward the SLCSP
TARGET_METAL_LEVEL = "Silver"

# Source columns, in file order
SLCSP_COLUMNS = ["zipcode", "rate"]
ZIPS_COLUMNS = ["zipcode", "state", "county_code", "name", "rate_area"]
PLANS_COLUMNS = ["plan_id", "state", "metal_level", "rate", "rate_area"]

# Output
OUTPUT_COLUMNS = ["zipcode", "rate"]
RATE_DECIMALS = 2

# Regex patterns
RATE_OUTPUT_RE = re.compile(r"^(-?\d+\.\d{2})?$")
