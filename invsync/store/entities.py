# invsync Entities
# Local inventory entities: items, locations and categories

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Union
from uuid import UUID

WHITE_RGBA = b"\xff\xff\xff\xff"


class EntityKind(str, Enum):
    """Kinds of locally stored entities."""

    ITEM = "item"
    LOCATION = "location"
    CATEGORY = "category"


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def encode_rgba(red: float, green: float, blue: float, alpha: float = 1.0) -> bytes:
    """Pack 0..1 color components into 4 bytes, 8 bits per channel."""
    return bytes(round(max(0.0, min(1.0, c)) * 255) for c in (red, green, blue, alpha))


def decode_rgba(data: Optional[bytes]) -> Optional[tuple[float, float, float, float]]:
    """Unpack 4 RGBA bytes into 0..1 components; None unless exactly 4 bytes."""
    if data is None or len(data) != 4:
        return None
    return tuple(b / 255.0 for b in data)  # type: ignore[return-value]


@dataclass(eq=False)
class Location:
    """A place where items are kept."""

    id: UUID
    name: str
    sort_order: int = 0
    display_in_row: bool = True
    color_data: bytes = WHITE_RGBA

    kind = EntityKind.LOCATION

    @property
    def color(self) -> tuple[float, float, float, float]:
        """Decoded color, white if the stored bytes are unusable."""
        return decode_rgba(self.color_data) or (1.0, 1.0, 1.0, 1.0)


@dataclass(eq=False)
class Category:
    """A grouping of items."""

    id: UUID
    name: str
    sort_order: int = 0
    display_in_row: bool = True

    kind = EntityKind.CATEGORY


@dataclass(eq=False)
class Item:
    """An inventory item, optionally linked to a location and a category."""

    id: UUID
    name: str
    quantity: int = 0
    sort_order: int = 0
    modified_date: datetime = field(default_factory=utcnow)
    creation_date: datetime = field(default_factory=utcnow)
    symbol: Optional[str] = None
    symbol_color_data: Optional[bytes] = None
    image_data: Optional[bytes] = None
    location: Optional[Location] = None
    category: Optional[Category] = None

    kind = EntityKind.ITEM


Entity = Union[Item, Location, Category]
