"""Structural checks applied to parsed menus before they are persisted."""

from __future__ import annotations

from typing import List

from menu_ocr.schemas import MenuItem, MenuValidation, ParsedMenu
from menu_ocr.services.patterns import PRICE_PATTERNS


def validate_menu_item(item: MenuItem) -> MenuValidation:
    """Report every problem with a single item."""

    errors = _item_errors(item)
    return MenuValidation(is_valid=not errors, errors=errors)


def validate_menu(menu: ParsedMenu) -> MenuValidation:
    """Report every problem with a menu, its sections and their items.

    Item problems are prefixed with 1-based section and item positions, one
    message per problem.
    """

    errors: List[str] = []

    if not (menu.restaurant_name or "").strip():
        errors.append("Restaurant name is required")

    if not menu.sections:
        errors.append("At least one menu section is required")

    for section_number, section in enumerate(menu.sections, start=1):
        if not (section.name or "").strip():
            errors.append(f"Section {section_number} name is required")

        if not section.items:
            errors.append(f"Section {section_number} must have at least one item")

        for item_number, item in enumerate(section.items, start=1):
            errors.extend(
                f"Section {section_number}, Item {item_number}: {message}"
                for message in _item_errors(item)
            )

    return MenuValidation(is_valid=not errors, errors=errors)


def _item_errors(item: MenuItem) -> List[str]:
    errors: List[str] = []

    if not (item.name or "").strip():
        errors.append("Item name is required")

    if not (item.price or "").strip():
        errors.append("Item price is required")

    if not (item.category or "").strip():
        errors.append("Item category is required")

    if item.price and not _is_recognised_price(item.price):
        errors.append("Invalid price format")

    return errors


def _is_recognised_price(price: str) -> bool:
    return any(entry.pattern.search(price) for entry in PRICE_PATTERNS)
