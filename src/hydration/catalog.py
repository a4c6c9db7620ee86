"""
Drink Catalog.

Static table of drink kinds with their hydration-effectiveness factor
and caffeine density. Lookups never fail: anything not in the table
resolves to DEFAULT_DRINK, which hydrates like water and carries no
caffeine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union


class DrinkKind(str, Enum):
    """Kinds of drinks a user can log."""

    WATER = "water"
    TEA = "tea"
    COFFEE = "coffee"
    SODA = "soda"
    JUICE = "juice"
    ENERGY = "energy"


@dataclass(frozen=True)
class DrinkDefinition:
    """Catalog entry for a drink kind."""

    kind: str
    name: str
    hydration_factor: float  # 1.0 = fully hydrating
    caffeine_per_ml: float  # mg per ml
    icon: str = ""
    color: str = ""


DRINK_CATALOG: Dict[DrinkKind, DrinkDefinition] = {
    DrinkKind.WATER: DrinkDefinition("water", "Water", 1.0, 0.0, "💧", "blue"),
    DrinkKind.TEA: DrinkDefinition("tea", "Tea", 0.95, 0.2, "🍵", "emerald"),  # ~20mg/100ml
    DrinkKind.COFFEE: DrinkDefinition("coffee", "Coffee", 0.85, 0.4, "☕", "amber"),  # ~40mg/100ml
    DrinkKind.SODA: DrinkDefinition("soda", "Soda", 0.9, 0.1, "🥤", "red"),  # ~10mg/100ml
    DrinkKind.JUICE: DrinkDefinition("juice", "Juice", 1.0, 0.0, "🧃", "orange"),
    DrinkKind.ENERGY: DrinkDefinition("energy", "Energy", 0.85, 0.32, "⚡", "purple"),  # ~32mg/100ml
}

# Used for any kind the catalog does not recognize
DEFAULT_DRINK = DrinkDefinition("unknown", "Unknown", 1.0, 0.0)


def lookup(kind: Union[DrinkKind, str]) -> DrinkDefinition:
    """
    Resolve a drink kind to its catalog entry.

    Args:
        kind: A DrinkKind or its string value

    Returns:
        The matching DrinkDefinition, or DEFAULT_DRINK if unrecognized
    """
    try:
        return DRINK_CATALOG[DrinkKind(kind)]
    except ValueError:
        return DEFAULT_DRINK
