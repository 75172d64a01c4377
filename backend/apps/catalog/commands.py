from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict


@dataclass
class JewelleryWriteCommand:
    name: str
    description: str
    price: Decimal
    image_url: str
    category_id: int

    @staticmethod
    def from_validated(data: Dict[str, Any]) -> "JewelleryWriteCommand":
        return JewelleryWriteCommand(
            name=data["name"].strip(),
            description=(data.get("description") or "").strip(),
            price=data["price"],
            image_url=(data.get("image_url") or "").strip(),
            category_id=int(data["category_id"]),
        )

    def fields(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "image_url": self.image_url,
            "category_id": self.category_id,
        }


@dataclass
class CategoryWriteCommand:
    name: str
    description: str = ""
    icon_name: str = ""

    @staticmethod
    def from_validated(data: Dict[str, Any]) -> "CategoryWriteCommand":
        return CategoryWriteCommand(
            name=data["name"].strip(),
            description=(data.get("description") or "").strip(),
            icon_name=(data.get("icon_name") or "").strip(),
        )

    def fields(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "icon_name": self.icon_name,
        }
