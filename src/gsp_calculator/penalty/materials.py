"""Ground material catalog."""

from __future__ import annotations

from dataclasses import dataclass

from gsp_calculator.errors import ConfigurationError


@dataclass(frozen=True)
class MaterialProfile:
    """Where a material's segment starts inside the shared penalty tables."""

    name: str

    speed_table_offset: int
    """Offset into the speed-indexed tables (multiples of 16)."""

    vla_table_offset: int
    """Offset into the VLA-indexed tables (multiples of 10)."""


MATERIALS: dict[str, MaterialProfile] = {
    m.name: m
    for m in (
        MaterialProfile("semirough", 32, 20),
        MaterialProfile("fairway", 48, 47),
        MaterialProfile("tee", 48, 47),
        MaterialProfile("rough", 0, 0),
        MaterialProfile("earth", 0, 0),
        MaterialProfile("pinestraw", 0, 0),
        MaterialProfile("leaves", 0, 0),
        MaterialProfile("deeprough", 16, 10),
        MaterialProfile("concrete", 48, 30),
        MaterialProfile("stone", 48, 30),
        MaterialProfile("sand", 64, 40),
    )
}

# Struck cleanly: never penalised, whatever the tables say.
IDENTITY_MATERIALS = frozenset({"fairway", "tee"})


def normalize_material(name: str) -> str:
    """Return the canonical key for *name* (case and outer whitespace folded)."""
    return name.strip().lower()


def get_material(name: str) -> MaterialProfile:
    """Look up a material by exact canonical name.

    Raises:
        ConfigurationError: If *name* is not a known material.
    """
    key = normalize_material(name)
    try:
        return MATERIALS[key]
    except KeyError:
        raise ConfigurationError(
            f"Unknown material {name!r}; expected one of {sorted(MATERIALS)}"
        ) from None
