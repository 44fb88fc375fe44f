"""Read-only accuracy scoring of parsed menus against known expectations.

Used to benchmark the parser on reference menus: nothing here mutates the
menu or feeds back into parsing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from menu_ocr.schemas import MenuItem, ParsedMenu

logger = logging.getLogger(__name__)

_MIN_NAME_LENGTH = 3


@dataclass(frozen=True)
class MenuAccuracyReport:
    """Ratios describing how closely a parse matched expectations."""

    total_items: int
    expected_items: int
    found_sections: List[str]
    item_count_accuracy: float
    section_accuracy: float
    price_accuracy: float
    name_accuracy: float


def score_menu(
    menu: ParsedMenu,
    *,
    expected_items: int,
    expected_sections: Sequence[str],
) -> MenuAccuracyReport:
    """Compare a parsed menu with the item count and sections a human expects."""

    items: List[MenuItem] = [item for section in menu.sections for item in section.items]
    total = len(items)
    parsed_names = [section.name.lower() for section in menu.sections]

    found = [
        expected
        for expected in expected_sections
        if any(_overlaps(expected.lower(), parsed) for parsed in parsed_names)
    ]

    report = MenuAccuracyReport(
        total_items=total,
        expected_items=expected_items,
        found_sections=found,
        item_count_accuracy=_count_ratio(total, expected_items),
        section_accuracy=len(found) / len(expected_sections) if expected_sections else 0.0,
        price_accuracy=_share(items, lambda item: bool(item.price)),
        name_accuracy=_share(
            items,
            lambda item: len(item.name) >= _MIN_NAME_LENGTH and "$" not in item.name,
        ),
    )
    logger.debug(
        "Accuracy for %r: %d/%d items, sections %.2f",
        menu.restaurant_name,
        total,
        expected_items,
        report.section_accuracy,
    )
    return report


def overall_accuracy(reports: Iterable[MenuAccuracyReport]) -> float:
    """Mean item-count accuracy across several benchmark menus."""

    ratios = [report.item_count_accuracy for report in reports]
    if not ratios:
        return 0.0
    return sum(ratios) / len(ratios)


def _overlaps(left: str, right: str) -> bool:
    return left in right or right in left


def _count_ratio(actual: int, expected: int) -> float:
    if actual <= 0 or expected <= 0:
        return 0.0
    return min(actual / expected, expected / actual)


def _share(items: Sequence[MenuItem], predicate) -> float:
    if not items:
        return 0.0
    return sum(1 for item in items if predicate(item)) / len(items)
