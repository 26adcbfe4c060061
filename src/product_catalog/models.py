from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    description: str
    price: float
    category: str
    in_stock: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category,
            "inStock": self.in_stock,
        }


def default_products() -> List[Product]:
    return [
        Product("1", "Laptop", "High-performance laptop with 16GB RAM", 1200, "electronics", True),
        Product("2", "Smartphone", "Latest model with 128GB storage", 800, "electronics", True),
        Product("3", "Coffee Maker", "Programmable coffee maker with timer", 50, "kitchen", False),
        Product("4", "Desk Chair", "Ergonomic office chair", 150, "furniture", True),
        Product("5", "Bookshelf", "5-tier wooden bookshelf", 80, "furniture", False),
    ]
