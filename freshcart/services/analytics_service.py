# freshcart/services/analytics_service.py
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Dict

from sqlalchemy.orm import Session

from freshcart.domain.cart import money
from freshcart.repos.catalog_repo import CategoryRepo, ProductRepo
from freshcart.repos.storage import OrderStore
from freshcart.repos.user_repo import UserRepo
from freshcart.services.order_service import order_item_amount
from freshcart.utils.settings import LOW_STOCK_THRESHOLD


def _aware(value: datetime) -> datetime:
    # sqlite zwraca naiwne daty
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


class AnalyticsService:
    """Admin dashboard figures, computed from stored orders and the catalog."""

    def __init__(self, db: Session, store: OrderStore):
        self.store = store
        self.products = ProductRepo(db)
        self.categories = CategoryRepo(db)
        self.users = UserRepo(db)

    def summary(self, now: datetime | None = None, top: int = 5) -> Dict[str, Any]:
        now = now or datetime.now(timezone.utc)
        orders = self.store.list_orders()
        products = self.products.list_products()

        total_revenue = sum((Decimal(o.total) for o in orders), Decimal("0"))

        orders_by_status: Dict[str, int] = {}
        for o in orders:
            orders_by_status[o.status] = orders_by_status.get(o.status, 0) + 1

        week_ago = now - timedelta(days=7)
        recent = [o for o in orders if o.created_at and _aware(o.created_at) >= week_ago]

        sales: Dict[str, Dict[str, Any]] = {}
        for o in orders:
            for item in self.store.get_order_items(o.id):
                entry = sales.setdefault(
                    item.product_id,
                    {
                        "product_id": item.product_id,
                        "product_name": item.product_name,
                        "total_quantity": 0,
                        "total_revenue": Decimal("0"),
                    },
                )
                entry["total_quantity"] += item.quantity
                entry["total_revenue"] += order_item_amount(item)

        top_products = sorted(sales.values(), key=lambda s: s["total_revenue"], reverse=True)[:top]
        for entry in top_products:
            entry["total_revenue"] = money(entry["total_revenue"])

        low_stock = [p for p in products if p.in_stock < LOW_STOCK_THRESHOLD]

        return {
            "summary": {
                "total_revenue": money(total_revenue),
                "total_orders": len(orders),
                "total_products": len(products),
                "total_users": len(self.users.list_users()),
                "total_categories": len(self.categories.list_categories()),
            },
            "orders_by_status": orders_by_status,
            "recent_orders": len(recent),
            "top_products": top_products,
            "low_stock_products": len(low_stock),
            "low_stock_items": [
                {"id": p.id, "name": p.name, "in_stock": p.in_stock} for p in low_stock
            ],
        }
