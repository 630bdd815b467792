# nursery/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from nursery.api import api_router
from nursery.data.database import Base, engine
from nursery.data.seed import seed
from nursery.utils.logging import configure_logging, get_logger

# IMPORT WSZYSTKICH MODELI PRZED CREATE_ALL
import nursery.data.models  # noqa: F401

logger = get_logger(__name__)


def init_db() -> None:
    logger.info(f"Initializing database, tables: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise
    seed()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Nursery Haven Storefront",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.include_router(api_router)
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
