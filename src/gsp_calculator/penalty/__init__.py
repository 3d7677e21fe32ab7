"""Ground material penalties.

Public API
----------
PenaltyModel        - material + launch -> speed/spin/VLA multipliers
PenaltyFactors      - the three multipliers
MaterialProfile     - a material's offsets into the shared tables
PenaltyTables       - one revision of the multiplier tables
get_material        - exact material lookup
get_penalty_tables  - table revision lookup by name
"""

from gsp_calculator.penalty.materials import (
    IDENTITY_MATERIALS,
    MATERIALS,
    MaterialProfile,
    get_material,
    normalize_material,
)
from gsp_calculator.penalty.model import IDENTITY, PenaltyFactors, PenaltyModel
from gsp_calculator.penalty.tables import (
    LEGACY,
    REVISED,
    TABLE_REVISIONS,
    PenaltyTables,
    get_penalty_tables,
)

__all__ = [
    "IDENTITY",
    "IDENTITY_MATERIALS",
    "LEGACY",
    "MATERIALS",
    "MaterialProfile",
    "PenaltyFactors",
    "PenaltyModel",
    "PenaltyTables",
    "REVISED",
    "TABLE_REVISIONS",
    "get_material",
    "get_penalty_tables",
    "normalize_material",
]
