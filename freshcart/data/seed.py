# freshcart/data/seed.py
from decimal import Decimal

from freshcart.data.database import SessionLocal
from freshcart.data.models import CategoryModel, ProductModel
from freshcart.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CATEGORIES = {
    "Fruits": "Fresh seasonal fruits",
    "Vegetables": "Organic vegetables",
    "Herbs": "Fresh herbs and greens",
}

# (nazwa, kategoria, cena za kg, stan)
DEFAULT_PRODUCTS = [
    ("Organic Apples", "Fruits", "120", 50),
    ("Fresh Bananas", "Fruits", "50", 100),
    ("Alphonso Mangoes", "Fruits", "300", 30),
    ("Organic Tomatoes", "Vegetables", "40", 80),
    ("Baby Spinach", "Vegetables", "60", 40),
    ("Fresh Coriander", "Herbs", "80", 25),
    ("Holy Basil", "Herbs", "150", 8),
]


def seed():
    db = SessionLocal()
    try:
        # tylko gdy baza pusta
        if db.query(CategoryModel).first():
            return

        categories = {}
        for name, description in DEFAULT_CATEGORIES.items():
            category = CategoryModel(name=name, description=description)
            db.add(category)
            categories[name] = category
        db.flush()

        for name, category, price, stock in DEFAULT_PRODUCTS:
            db.add(
                ProductModel(
                    name=name,
                    description=f"{name}, grown without pesticides",
                    price=Decimal(price),
                    category_id=categories[category].id,
                    category=category,
                    image_url="",
                    in_stock=stock,
                )
            )
        db.commit()
        logger.info(f"Seeded {len(categories)} categories and {len(DEFAULT_PRODUCTS)} products")
    finally:
        db.close()
