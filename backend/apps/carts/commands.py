from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class AddToCartCommand:
    jewellery_id: int
    quantity: int = 1

    @staticmethod
    def from_validated(data: Dict[str, Any]) -> "AddToCartCommand":
        return AddToCartCommand(
            jewellery_id=int(data["jewellery_id"]),
            quantity=int(data.get("quantity", 1)),
        )


@dataclass
class UpdateCartItemCommand:
    item_id: int
    quantity: int

    @staticmethod
    def from_validated(item_id: int, data: Dict[str, Any]) -> "UpdateCartItemCommand":
        return UpdateCartItemCommand(item_id=int(item_id), quantity=int(data["quantity"]))

    @property
    def removes_item(self) -> bool:
        return self.quantity <= 0
