"""Shared pydantic schemas."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class MenuSource(str, Enum):
    """Where a menu's data came from."""

    OCR = "ocr"
    MANUAL = "manual"
    IMPORT = "import"


class BoundingBox(BaseModel):
    """Region reported by the OCR engine for a run of text."""

    x: float
    y: float
    width: float
    height: float
    text: str = ""
    confidence: float = 0.0


class OCRResult(BaseModel):
    """Output contract of the external OCR engine.

    Only ``text`` drives parsing. ``confidence`` and ``bounding_boxes`` are kept
    so engines can report them, but no parsing decision branches on either.
    """

    text: str
    confidence: float = 0.0
    bounding_boxes: List[BoundingBox] = Field(default_factory=list)


class MenuItem(BaseModel):
    """A single priced line of a menu."""

    id: str
    name: str = Field(default="", description="Dish name with the price removed")
    description: str | None = None
    price: str = Field(default="", description="Price text as printed on the menu")
    category: str = Field(default="", description="Name of the enclosing section")
    is_available: bool = True
    allergens: List[str] | None = None
    calories: int | None = None
    image_url: str | None = None


class MenuSection(BaseModel):
    """Top-level grouping of menu items."""

    id: str
    name: str = ""
    description: str | None = None
    items: List[MenuItem] = Field(default_factory=list)
    order: int = 0


class ParsedMenu(BaseModel):
    """Structured menu produced by a single parse."""

    id: str
    restaurant_name: str = ""
    sections: List[MenuSection] = Field(default_factory=list)
    last_updated: datetime = Field(
        default_factory=lambda: datetime.now(tz=timezone.utc)
    )
    source: MenuSource = MenuSource.OCR


class MenuValidation(BaseModel):
    """Outcome of validating an item or a whole menu."""

    is_valid: bool
    errors: List[str] = Field(default_factory=list)


class ParseMenuRequest(BaseModel):
    """Payload for parsing OCR output into a menu."""

    ocr_result: OCRResult
    restaurant_name: str = ""


class ParseMenuResponse(BaseModel):
    """Response payload after a successful parse."""

    parsed_menu: ParsedMenu
    item_count: int
    section_count: int
    message: str


class MenuVocabulary(BaseModel):
    """Fixed vocabularies used by menu editors."""

    sections: List[str]
    allergens: List[str]
