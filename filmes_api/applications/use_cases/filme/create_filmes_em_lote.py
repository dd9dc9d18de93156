from typing import Any, Dict, List, Sequence

from pydantic import ValidationError as PydanticValidationError

from filmes_api.applications.interfaces.dtos.filme import CreateFilmeDto
from filmes_api.applications.services.filme_dto_mapper import FilmeDtoMapper
from filmes_api.applications.services.filme_patch_service import errors_from_pydantic
from filmes_api.domain.exceptions import ValidationError
from filmes_api.domain.ports.repositories.filme_repository import FilmeRepository
from filmes_api.domain.ports.services.logger import LoggerPort


class CreateFilmesEmLoteUseCase:
    """Creates filmes one by one, committing each item on its own.

    There is no shared transaction. Items that fail validation are skipped
    and reported together after the loop, while every valid item is
    committed in request order. A database error while committing an item
    propagates: the items before it stay persisted and the ones after it
    are never attempted.
    """

    def __init__(self, filme_repository: FilmeRepository, logger: LoggerPort):
        self.filme_repository = filme_repository
        self.logger = logger

    async def execute(self, items: Sequence[Any]) -> List[CreateFilmeDto]:
        accepted: List[CreateFilmeDto] = []
        errors: Dict[str, List[str]] = {}

        for index, item in enumerate(items):
            try:
                filme_data = CreateFilmeDto.model_validate(item)
            except PydanticValidationError as e:
                self.logger.warning(f"Skipping invalid item {index}")
                errors.update(errors_from_pydantic(e, prefix=f"[{index}]"))
                continue

            try:
                filme = await self.filme_repository.create(FilmeDtoMapper.create_dto_to_domain(filme_data))
            except Exception:
                self.logger.exception(f"Batch aborted at item {index}; {len(accepted)} filmes already committed")
                raise
            self.logger.info(f"Id: {filme.id} - Titulo: {filme.titulo} - Duracao: {filme.duracao}")
            accepted.append(filme_data)

        if errors:
            raise ValidationError(errors)

        return accepted
