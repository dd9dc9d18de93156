from contextlib import asynccontextmanager

from fastapi import FastAPI

from filmes_api.infrastructure.config.dependencies import get_api_settings, get_settings
from filmes_api.infrastructure.logging.logger import Logger, setup_logging
from filmes_api.infrastructure.persistence.database import create_tables, dispose_engine, get_engine, set_engine
from filmes_api.presentation.routers import filmes

setup_logging()

logger = Logger.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = get_engine()
    set_engine(engine)
    if get_settings().CREATE_TABLES:
        await create_tables(engine)
    logger.info(f"{app.title} {app.version} started")
    try:
        yield
    finally:
        await dispose_engine()


api_settings = get_api_settings()

app = FastAPI(
    title=api_settings.title,
    version=api_settings.version,
    description=api_settings.description,
    root_path=api_settings.root_path,
    lifespan=lifespan,
)

app.include_router(filmes.router)
