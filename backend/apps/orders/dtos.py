from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class OrderAddressDTO:
    id: int
    street: str
    city: str
    state: str
    postal_code: str
    country: str


@dataclass
class OrderItemDTO:
    id: int
    jewellery_id: int
    name: str
    description: str
    image_url: str
    quantity: int
    price: str


@dataclass
class OrderDTO:
    id: int
    total_amount: str
    status: str
    order_date: Optional[str]
    payment_method: str
    address: OrderAddressDTO
    items: List[OrderItemDTO] = field(default_factory=list)
