"""Domain models for purchasable ingredients."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Ingredient:
    """An ingredient sold through the shop."""

    id: str
    name: str
    price: float
    unit: str
    sell: bool
    description: str
    image: str = ""
    url: dict[str, str] = field(default_factory=dict)
    nutrition: dict[str, str] = field(default_factory=dict)
    additional_info: str = ""
