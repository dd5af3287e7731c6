import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


SLCSP_CSV = """zipcode,rate
64148,
36749,
99999,
40813,
64148,
"""

ZIPS_CSV = """zipcode,state,county_code,name,rate_area
64148,MO,29095,Jackson,3
36749,AL,01001,Autauga,11
36749,AL,01047,Dallas,13
40813,KY,21013,Bell,8
54923,WI,55139,Winnebago,15
"""

PLANS_CSV = """plan_id,state,metal_level,rate,rate_area
74449NR9870320,MO,Silver,298.62,3
26325VH2723968,MO,Silver,421.43,3
84178JV9421839,MO,Silver,298.62,3
05276NA2900195,MO,Bronze,190.00,3
17192XP1207045,AL,Silver,351.58,11
52161YL9681479,AL,Silver,211.01,11
09846WB8636920,KY,Silver,247.28,8
26631YR3384683,WI,Silver,192.13,15
"""


@pytest.fixture
def write_inputs(tmp_path):
    """Write the three input CSVs into tmp_path; any of them can be overridden."""

    def _write(slcsp=SLCSP_CSV, zips=ZIPS_CSV, plans=PLANS_CSV):
        paths = {}
        for name, content in (("slcsp", slcsp), ("zips", zips), ("plans", plans)):
            path = tmp_path / f"{name}.csv"
            path.write_text(content)
            paths[name] = str(path)
        return paths

    return _write
