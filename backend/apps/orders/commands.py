from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class CreateOrderCommand:
    address_id: int
    payment_method: str

    @staticmethod
    def from_validated(data: Dict[str, Any]) -> "CreateOrderCommand":
        return CreateOrderCommand(
            address_id=int(data["address_id"]),
            payment_method=data["payment_method"],
        )
