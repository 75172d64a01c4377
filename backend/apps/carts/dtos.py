from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class CartItemDTO:
    id: int
    jewellery_id: int
    name: str
    description: str
    price: str
    image_url: str
    quantity: int
    added_at: Optional[str]


@dataclass
class CartDTO:
    id: int
    items: List[CartItemDTO] = field(default_factory=list)
    total_items: int = 0
    total_amount: str = "0.00"
