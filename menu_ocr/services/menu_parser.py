"""Rule-based conversion of OCR text into structured menus."""

from __future__ import annotations

import logging
import re
from collections import defaultdict
from datetime import datetime, timezone
from itertools import count
from typing import DefaultDict, List, Sequence

from menu_ocr.schemas import MenuItem, MenuSection, MenuSource, OCRResult, ParsedMenu
from menu_ocr.services.patterns import (
    EMOJI_PATTERN,
    FALLBACK_SECTION,
    MENU_SECTIONS,
    OCR_SUBSTITUTIONS,
    PRICE_PATTERNS,
    SECTION_KEYWORDS,
)

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
_MAX_DESCRIPTION_LENGTH = 100


def clean_text(text: str) -> str:
    """Strip emoji, collapse whitespace and patch common OCR misreads.

    Newlines count as whitespace, so multi-line input comes back as a single
    line. The zero/O fold is lossy: digit zeros inside prices become letters
    as well.
    """

    cleaned = EMOJI_PATTERN.sub("", text or "")
    cleaned = _WHITESPACE_RE.sub(" ", cleaned).strip()
    for _label, pattern, replacement in OCR_SUBSTITUTIONS:
        cleaned = pattern.sub(replacement, cleaned)
    return cleaned


def extract_prices(text: str) -> List[str]:
    """Return every distinct price-looking substring, first-seen order."""

    matches: List[str] = []
    for entry in PRICE_PATTERNS:
        matches.extend(entry.pattern.findall(text or ""))
    return list(dict.fromkeys(matches))


def classify_section(text: str) -> str:
    """Map a header line onto a canonical section name, or ``"Other"``."""

    lowered = (text or "").strip().lower()
    if not lowered:
        return FALLBACK_SECTION

    for section in MENU_SECTIONS:
        candidate = section.lower()
        if lowered == candidate or candidate in lowered or lowered in candidate:
            return section

    for entry in SECTION_KEYWORDS:
        if any(keyword in lowered for keyword in entry.keywords):
            return entry.section

    return FALLBACK_SECTION


def parse_menu_items(text: str) -> List[MenuItem]:
    """Walk menu text line by line and emit one item per priced line."""

    lines = [line.strip() for line in (text or "").split("\n") if line.strip()]
    items: List[MenuItem] = []
    item_ids = count(1)
    current_section = FALLBACK_SECTION

    index = 0
    while index < len(lines):
        line = lines[index]
        index += 1

        prices = extract_prices(line)
        section = classify_section(line)
        if section != FALLBACK_SECTION and not prices:
            current_section = section
            continue

        if prices:
            price = prices[0]
            # Only the first price is removed; any later one stays in the name.
            name = clean_text(line.replace(price, "", 1))
            if not name:
                continue

            description: str | None = None
            if index < len(lines):
                following = lines[index]
                if (
                    not extract_prices(following)
                    and 0 < len(following) < _MAX_DESCRIPTION_LENGTH
                ):
                    description = following
                    index += 1

            items.append(
                MenuItem(
                    id=f"item-{next(item_ids)}",
                    name=name,
                    description=description,
                    price=price,
                    category=current_section,
                    is_available=True,
                )
            )
        elif len(line) < _MAX_DESCRIPTION_LENGTH and "$" not in line:
            # Stray text after an item without a description becomes one.
            if items and not items[-1].description:
                items[-1] = items[-1].model_copy(update={"description": line})

    return items


def group_items_by_section(items: Sequence[MenuItem]) -> List[MenuSection]:
    """Bucket items by category, keeping the order categories first appear."""

    grouped: DefaultDict[str, List[MenuItem]] = defaultdict(list)
    for item in items:
        grouped[item.category].append(item)

    return [
        MenuSection(
            id=f"section-{order + 1}",
            name=name,
            items=section_items,
            order=order,
        )
        for order, (name, section_items) in enumerate(grouped.items())
    ]


def parse_menu_from_ocr(ocr_result: OCRResult, restaurant_name: str) -> ParsedMenu:
    """Build a :class:`ParsedMenu` from raw OCR output.

    Each OCR line is normalised on its own so that line breaks, and with them
    section headers and descriptions, survive cleaning.

    ``ocr_result.confidence`` and ``ocr_result.bounding_boxes`` are not read.
    """

    cleaned_lines = (clean_text(raw_line) for raw_line in ocr_result.text.splitlines())
    cleaned_text = "\n".join(line for line in cleaned_lines if line)

    items = parse_menu_items(cleaned_text)
    sections = group_items_by_section(items)

    parsed_at = datetime.now(tz=timezone.utc)
    logger.debug(
        "Parsed %d items into %d sections for %r",
        len(items),
        len(sections),
        restaurant_name,
    )
    return ParsedMenu(
        id=f"menu-{int(parsed_at.timestamp() * 1000)}",
        restaurant_name=restaurant_name,
        sections=sections,
        last_updated=parsed_at,
        source=MenuSource.OCR,
    )
