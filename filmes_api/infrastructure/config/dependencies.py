from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from filmes_api.domain.ports.repositories.filme_repository import FilmeRepository
from filmes_api.domain.ports.services.logger import LoggerPort
from filmes_api.infrastructure.adapters.repositories.sqlalchemy_filme_repository import (
    SQLAlchemyFilmeRepository,
)
from filmes_api.infrastructure.config.settings import ApiSettings, Settings
from filmes_api.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from filmes_api.infrastructure.persistence.database import get_session


def get_logger() -> LoggerPort:
    return StdLoggerAdapter("filmes_api.filmes")


def get_settings() -> Settings:
    return Settings()


def get_api_settings() -> ApiSettings:
    return ApiSettings()


def get_filme_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> FilmeRepository:
    return SQLAlchemyFilmeRepository(session)
