"""Menu parsing routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from menu_ocr.config import settings
from menu_ocr.schemas import (
    MenuValidation,
    MenuVocabulary,
    ParsedMenu,
    ParseMenuRequest,
    ParseMenuResponse,
)
from menu_ocr.services.menu_parser import parse_menu_from_ocr
from menu_ocr.services.patterns import ALLERGENS, MENU_SECTIONS
from menu_ocr.services.validation import validate_menu

router = APIRouter(prefix="/menu", tags=["menu"])

logger = logging.getLogger(__name__)


@router.post("/parse", response_model=ParseMenuResponse)
async def parse_menu(payload: ParseMenuRequest) -> ParseMenuResponse:
    ocr_result = payload.ocr_result
    if len(ocr_result.text) > settings.max_ocr_text_chars:
        raise HTTPException(
            status_code=413,
            detail="OCR text exceeds the maximum allowed length",
        )

    parsed_menu = parse_menu_from_ocr(ocr_result, payload.restaurant_name)
    validation = validate_menu(parsed_menu)
    if not validation.is_valid:
        logger.info(
            "Menu parsing failed for %r with %d errors",
            payload.restaurant_name,
            len(validation.errors),
        )
        raise HTTPException(
            status_code=400,
            detail={
                "error": "Menu parsing failed",
                "details": validation.errors,
                "parsed_menu": parsed_menu.model_dump(mode="json"),
            },
        )

    item_count = sum(len(section.items) for section in parsed_menu.sections)
    section_count = len(parsed_menu.sections)
    logger.info(
        "Parsed %d menu items from %d sections for %r (OCR confidence %.2f)",
        item_count,
        section_count,
        payload.restaurant_name,
        ocr_result.confidence,
    )
    return ParseMenuResponse(
        parsed_menu=parsed_menu,
        item_count=item_count,
        section_count=section_count,
        message=(
            f"Successfully parsed {item_count} menu items from {section_count} sections"
        ),
    )


@router.post("/validate", response_model=MenuValidation)
async def validate_parsed_menu(menu: ParsedMenu) -> MenuValidation:
    """Re-check a menu after manual edits, before it is saved."""

    return validate_menu(menu)


@router.get("/vocabulary", response_model=MenuVocabulary)
async def get_vocabulary() -> MenuVocabulary:
    return MenuVocabulary(sections=list(MENU_SECTIONS), allergens=list(ALLERGENS))
