"""Category domain service."""

import re
import unicodedata
from typing import Optional

from bookkeep.database.base import Database
from bookkeep.domain.entities import Category, TransactionType
from bookkeep.domain.errors import ValidationError

# (name, type, color)
DEFAULT_CATEGORIES = [
    ("Ventas", TransactionType.INCOME, "#4CAF50"),
    ("Servicios", TransactionType.INCOME, "#2196F3"),
    ("Inversiones", TransactionType.INCOME, "#9C27B0"),
    ("Salarios", TransactionType.EXPENSE, "#F44336"),
    ("Suministros", TransactionType.EXPENSE, "#FF9800"),
    ("Servicios Públicos", TransactionType.EXPENSE, "#795548"),
    ("Alquiler", TransactionType.EXPENSE, "#607D8B"),
    ("Marketing", TransactionType.EXPENSE, "#E91E63"),
]


def category_slug(name: str, category_type: str) -> str:
    """Build a stable category id such as ``expense-servicios-publicos``."""
    ascii_name = (
        unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    )
    slug = re.sub(r"[^a-z0-9]+", "-", ascii_name.lower()).strip("-")
    return f"{category_type}-{slug}"


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_category(
        self,
        name: str,
        category_type: str,
        color: str = "#cccccc",
        category_id: Optional[str] = None,
    ) -> str:
        """Create a category.

        Args:
            name: Category name
            category_type: "income" or "expense"
            color: Display color
            category_id: Optional explicit id; derived from name and type if None

        Returns:
            Category ID

        Raises:
            ValidationError: If the name is empty or the type is unknown
            ConflictError: If the category id already exists
        """
        if not name.strip():
            raise ValidationError("Category name cannot be empty")
        try:
            category_type = TransactionType(category_type).value
        except ValueError:
            raise ValidationError(
                f"Invalid category type '{category_type}'. Valid types: income, expense"
            )

        category = Category(
            id=category_id or category_slug(name, category_type),
            name=name.strip(),
            type=category_type,
            color=color,
        )
        return self.db.create_category(category)

    def get_category(self, category_id: str) -> Optional[Category]:
        """Get category by ID."""
        return self.db.get_category(category_id)

    def list_categories(self, category_type: Optional[str] = None) -> list[Category]:
        """List categories, optionally only those of one type."""
        categories = self.db.list_categories()
        if category_type is None:
            return categories
        return [cat for cat in categories if cat.type == category_type]
