import pytest

from skyculture.assets import MemoryAssetProvider, skyculture_asset
from skyculture.identifiers import IdentifierRegistry


NAMES_TXT = """// Test names
1 Alpha Star
2 Beta Star
3 Gamma
27366 Saiph Minor
"""

CONSTELLATIONS_TXT = """Ori|Orion |Alp-Bet Gam-27366
Tau|Taurus|Alp-Bet
"""

EDGES_TXT = """001:002 M+ 04:41:00 +15:30:00 04:41:00 +10:00:00 ORI TAU
001:003 M+ 06:18:00 +14:30:00 06:18:00 -04:00:00 ORI MON
"""


@pytest.fixture
def registry():
    """Registry resolving Orion and Taurus designations to small HD numbers."""
    return IdentifierRegistry({
        "Alp Ori": "HD 1",
        "Bet Ori": "HD 2",
        "Gam Ori": "HD 3",
        "Alp Tau": "HD 10",
        "Bet Tau": "HD 11",
    })


@pytest.fixture
def culture_assets():
    """The three test culture resources under the 'western' culture name."""
    return {
        skyculture_asset("western", "names.txt"): NAMES_TXT.encode("utf-8"),
        skyculture_asset("western", "constellations.txt"): CONSTELLATIONS_TXT.encode("utf-8"),
        skyculture_asset("western", "edges.txt"): EDGES_TXT.encode("utf-8"),
    }


@pytest.fixture
def asset_provider(culture_assets):
    return MemoryAssetProvider(culture_assets)
