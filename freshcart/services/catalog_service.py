# freshcart/services/catalog_service.py
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from freshcart.data.models._columns import utcnow
from freshcart.data.models.category import CategoryModel
from freshcart.data.models.product import ProductModel
from freshcart.repos.catalog_repo import CategoryRepo, ProductRepo
from freshcart.services.errors import NotFoundError
from freshcart.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogService:
    """Products and categories: public reads and admin management."""

    def __init__(self, db: Session):
        self.products = ProductRepo(db)
        self.categories = CategoryRepo(db)

    # query
    def list_products(self) -> List[ProductModel]:
        return self.products.list_products()

    def get_product(self, product_id: str) -> ProductModel:
        product = self.products.get_product(product_id)
        if not product:
            raise NotFoundError(f"Product {product_id} not found")
        return product

    def product_snapshot(self, product_id: str) -> Dict[str, Any]:
        """Fields the cart copies from the catalog when a product is added."""
        product = self.get_product(product_id)
        return {
            "id": product.id,
            "name": product.name,
            "price_per_kg": Decimal(product.price),
            "image_url": product.image_url,
        }

    def list_categories(self) -> List[CategoryModel]:
        return self.categories.list_categories()

    # commands
    def create_product(self, data: Dict[str, Any]) -> ProductModel:
        category_name = self._resolve_category_name(data.get("category_id"), data.get("category"))
        product = ProductModel(
            name=data["name"],
            description=data.get("description") or "",
            price=data["price"],
            category_id=data.get("category_id"),
            category=category_name,
            image_url=data.get("image_url") or "",
            in_stock=data.get("in_stock", 1),
        )
        created = self.products.create_product(product)
        logger.info(f"Created product {created.id} ({created.name})")
        return created

    def update_product(self, product_id: str, data: Dict[str, Any]) -> ProductModel:
        product = self.get_product(product_id)

        if "category_id" in data:
            product.category = self._resolve_category_name(data["category_id"], data.get("category"))
        for key, value in data.items():
            if key == "category" and "category_id" in data:
                continue
            setattr(product, key, value)
        product.updated_at = utcnow()

        updated = self.products.save(product)
        logger.info(f"Updated product {product_id}: {sorted(data)}")
        return updated

    def delete_product(self, product_id: str) -> None:
        if not self.products.delete_product(product_id):
            raise NotFoundError(f"Product {product_id} not found")
        logger.info(f"Deleted product {product_id}")

    def create_category(self, name: str, description: str | None = None) -> CategoryModel:
        if self.categories.get_category_by_name(name):
            raise ValueError(f"Category '{name}' already exists")
        created = self.categories.create_category(CategoryModel(name=name, description=description))
        logger.info(f"Created category {created.id} ({name})")
        return created

    def update_category(self, category_id: str, data: Dict[str, Any]) -> CategoryModel:
        category = self.categories.get_category(category_id)
        if not category:
            raise NotFoundError(f"Category {category_id} not found")
        for key, value in data.items():
            setattr(category, key, value)
        return self.categories.save(category)

    def delete_category(self, category_id: str) -> None:
        if not self.categories.delete_category(category_id):
            raise NotFoundError(f"Category {category_id} not found")
        logger.info(f"Deleted category {category_id}")

    def _resolve_category_name(self, category_id: str | None, fallback: str | None) -> str:
        if category_id:
            category = self.categories.get_category(category_id)
            if not category:
                raise NotFoundError(f"Category {category_id} not found")
            return category.name
        if not fallback:
            raise ValueError("Either category_id or category is required")
        return fallback
