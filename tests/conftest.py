import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    # Ensure `import a7p_server...` works without installing the package.
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def sample_payload():
    from a7p_server.infra.profile_schema import CoefRow, Payload, SwPos

    payload = Payload()
    profile = payload.profile
    profile.profile_name = "308 Win 175gr"
    profile.cartridge_name = "FGMM 175"
    profile.bullet_name = "SMK 175 HPBT"
    profile.short_name_top = "308"
    profile.short_name_bot = "175gr"
    profile.zero_x = -120
    profile.zero_y = 45
    profile.sc_height = 90
    profile.r_twist = 1000
    profile.c_muzzle_velocity = 8000
    profile.c_zero_temperature = 15
    profile.c_zero_air_pressure = 10000
    profile.c_zero_air_humidity = 50
    profile.b_diameter = 308
    profile.b_weight = 1750
    profile.b_length = 1240
    profile.twist_dir = 1
    profile.bc_type = 1
    profile.caliber = ".308 Win"
    profile.distances.extend([10000, 20000, 30000])
    profile.switches.extend(
        [
            SwPos(c_idx=255, reticle_idx=0, zoom=1, distance=10000, distance_from=0),
            SwPos(c_idx=1, reticle_idx=2, zoom=4, distance=2, distance_from=1),
        ]
    )
    profile.coef_rows.append(CoefRow(bc_cd=2430, mv=0))
    return payload
