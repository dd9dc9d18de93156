from typing import Sequence

from filmes_api.applications.interfaces.dtos.patch import PatchOperation
from filmes_api.applications.services.filme_dto_mapper import FilmeDtoMapper
from filmes_api.applications.services.filme_patch_service import FilmePatchService
from filmes_api.domain.exceptions import NotFoundError
from filmes_api.domain.ports.repositories.filme_repository import FilmeRepository
from filmes_api.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class PatchFilmeUseCase:
    def __init__(self, filme_repository: FilmeRepository):
        self.filme_repository = filme_repository

    async def execute(self, filme_id: int, operations: Sequence[PatchOperation]) -> None:
        existing_filme = await self.filme_repository.get_by_id(filme_id)
        if not existing_filme:
            raise NotFoundError(f"Filme with id {filme_id} not found")

        to_patch = FilmeDtoMapper.domain_to_update_dto(existing_filme)
        patched = FilmePatchService.apply(to_patch, operations)

        FilmeDtoMapper.apply_update_dto(patched, existing_filme)
        await self.filme_repository.update(existing_filme)
        logger.info(f"Filme {filme_id} patched with {len(operations)} operations")
