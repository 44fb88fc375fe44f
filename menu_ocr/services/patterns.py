"""Lookup tables that drive OCR menu parsing.

Every table is ordered. Callers walk them front to back and the first hit
wins, so reordering an entry changes classification results.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Tuple

__all__ = [
    "ALLERGENS",
    "EMOJI_PATTERN",
    "EMOJI_RANGES",
    "FALLBACK_SECTION",
    "MENU_SECTIONS",
    "OCR_SUBSTITUTIONS",
    "PRICE_PATTERNS",
    "PricePattern",
    "SECTION_KEYWORDS",
    "SectionKeywords",
]

FALLBACK_SECTION: Final[str] = "Other"


@dataclass(frozen=True)
class PricePattern:
    """A named regular expression recognising one way prices are printed."""

    label: str
    pattern: re.Pattern[str]


@dataclass(frozen=True)
class SectionKeywords:
    """Synonyms that map loosely-worded headers onto a canonical section."""

    section: str
    keywords: Tuple[str, ...]


# (label, first codepoint, last codepoint)
EMOJI_RANGES: Final[Tuple[Tuple[str, int, int], ...]] = (
    ("emoticons", 0x1F600, 0x1F64F),
    ("misc_symbols_pictographs", 0x1F300, 0x1F5FF),
    ("transport", 0x1F680, 0x1F6FF),
    ("flags", 0x1F1E0, 0x1F1FF),
    ("misc_symbols", 0x2600, 0x26FF),
    ("dingbats", 0x2700, 0x27BF),
    ("supplemental_symbols", 0x1F900, 0x1F9FF),
    ("symbols_pictographs_ext_a", 0x1FA70, 0x1FAFF),
)

EMOJI_PATTERN: Final[re.Pattern[str]] = re.compile(
    "[" + "".join(f"{chr(start)}-{chr(end)}" for _, start, end in EMOJI_RANGES) + "]"
)

PRICE_PATTERNS: Final[Tuple[PricePattern, ...]] = (
    PricePattern("dollar", re.compile(r"\$\d+\.?\d*")),  # $10, $10.50
    PricePattern("decimal", re.compile(r"\d+\.\d{2}")),  # 10.50
    PricePattern("dollar_range", re.compile(r"\$\d+/\d+")),  # $10/15
    PricePattern("price_label", re.compile(r"price\s*:\s*\$\d+\.?\d*", re.IGNORECASE)),
    PricePattern("cost_label", re.compile(r"cost\s*:\s*\$\d+\.?\d*", re.IGNORECASE)),
)

# Applied in order after whitespace normalisation.
OCR_SUBSTITUTIONS: Final[Tuple[Tuple[str, re.Pattern[str], str], ...]] = (
    ("pipe_as_capital_i", re.compile(r"\|"), "I"),
    ("zero_as_capital_o", re.compile(r"[0O]"), "O"),
)

MENU_SECTIONS: Final[Tuple[str, ...]] = (
    "Appetizers",
    "Salads",
    "Soups",
    "Breakfast",
    "Lunch",
    "Dinner",
    "Main Courses",
    "Entrees",
    "Sandwiches",
    "Burgers",
    "Pizza",
    "Pasta",
    "Seafood",
    "Steak",
    "Chicken",
    "Vegetarian",
    "Vegan",
    "Desserts",
    "Beverages",
    "Drinks",
    "Cocktails",
    "Wine",
    "Beer",
    "Coffee",
    "Tea",
    "Kids Menu",
    "Specials",
    "Daily Specials",
    "Happy Hour",
    "Sides",
    "Extras",
)

# Consulted only when no entry of MENU_SECTIONS matched.
SECTION_KEYWORDS: Final[Tuple[SectionKeywords, ...]] = (
    SectionKeywords("Appetizers", ("appetizer", "starter", "small plates")),
    SectionKeywords("Main Courses", ("main course", "entree", "mains")),
    SectionKeywords("Desserts", ("dessert", "sweet", "treats")),
    SectionKeywords("Beverages", ("drink", "beverage", "bar")),
    SectionKeywords("Breakfast", ("breakfast", "morning")),
    SectionKeywords("Lunch", ("lunch", "midday")),
    SectionKeywords("Dinner", ("dinner", "evening")),
    SectionKeywords("Burgers", ("burger", "sandwich")),
    SectionKeywords("Pizza", ("pizza", "pie")),
    SectionKeywords("Pasta", ("pasta", "noodle")),
    SectionKeywords("Salads", ("salad", "greens")),
    SectionKeywords("Soups", ("soup", "broth")),
    SectionKeywords("Kids Menu", ("kids", "children")),
    SectionKeywords("Specials", ("special", "featured")),
)

ALLERGENS: Final[Tuple[str, ...]] = (
    "gluten",
    "wheat",
    "dairy",
    "milk",
    "eggs",
    "soy",
    "nuts",
    "peanuts",
    "tree nuts",
    "fish",
    "shellfish",
    "sesame",
    "mustard",
    "sulfites",
)
