"""
Elemental attributes and the two fixed relations between them.

GENERATES is the productive cycle (wood feeds fire, fire makes earth, ...),
OVERCOMES is the destructive cycle. Both are directed 5-cycles.
"""

from typing import Optional, Dict

FIRE = "fire"
METAL = "metal"
WOOD = "wood"
WATER = "water"
EARTH = "earth"

# Canonical order, also used to break ties between equal attributes
ELEMENTS = (FIRE, METAL, WOOD, WATER, EARTH)

GENERATES: Dict[str, str] = {
    WOOD: FIRE,
    FIRE: EARTH,
    EARTH: METAL,
    METAL: WATER,
    WATER: WOOD,
}

OVERCOMES: Dict[str, str] = {
    WOOD: EARTH,
    EARTH: WATER,
    WATER: FIRE,
    FIRE: METAL,
    METAL: WOOD,
}

LABELS: Dict[str, str] = {
    FIRE: "火",
    METAL: "金",
    WOOD: "木",
    WATER: "水",
    EARTH: "土",
}

_FROM_LABEL = {label: element for element, label in LABELS.items()}


def parse_element(name: Optional[str]) -> Optional[str]:
    """Canonical element for a name or label, None when unrecognised."""
    if not isinstance(name, str):
        return None
    key = name.strip()
    if key in _FROM_LABEL:
        return _FROM_LABEL[key]
    key = key.lower()
    return key if key in GENERATES else None


def generates(element: str) -> str:
    return GENERATES[element]


def overcomes(element: str) -> str:
    return OVERCOMES[element]


def element_label(element: str) -> str:
    return LABELS.get(element, element)
