# freshcart/main.py
from fastapi import FastAPI
import uvicorn

from freshcart.data.database import Base, engine
from freshcart.api.routers import admin, carts, catalog, enquiries, health, orders, payments, users
from freshcart.utils.settings import SEED_DEMO_DATA
from freshcart.utils.logging import get_logger

# import wszystkich modeli na poczatku (przed create_all)
import freshcart.data.models  # noqa: F401

logger = get_logger(__name__)


def init_db() -> None:
    logger.info(f"Initializing database, tables: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise

    if SEED_DEMO_DATA:
        from freshcart.data.seed import seed

        seed()


def create_app() -> FastAPI:
    app = FastAPI(
        title="FreshCart",
        version="1.0.0",
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(catalog.router)
    app.include_router(carts.router)
    app.include_router(orders.router)
    app.include_router(payments.router)
    app.include_router(users.router)
    app.include_router(enquiries.router)
    app.include_router(admin.router)

    return app


init_db()
app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
