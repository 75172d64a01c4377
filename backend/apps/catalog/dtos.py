from dataclasses import dataclass
from typing import Optional


@dataclass
class CategoryDTO:
    id: int
    name: str
    description: str
    icon_name: str
    jewellery_count: int


@dataclass
class JewelleryDTO:
    id: int
    name: str
    description: str
    price: str
    image_url: str
    category_id: int
    category_name: Optional[str]
    created_at: Optional[str]
    updated_at: Optional[str]
