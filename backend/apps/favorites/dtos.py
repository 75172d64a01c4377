from dataclasses import dataclass
from typing import Optional

from apps.catalog.dtos import JewelleryDTO


@dataclass
class FavoriteDTO:
    id: int
    created_at: Optional[str]
    jewellery: JewelleryDTO
