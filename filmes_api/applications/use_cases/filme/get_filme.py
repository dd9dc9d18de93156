from filmes_api.applications.interfaces.dtos.filme import ReadFilmeDto
from filmes_api.applications.services.filme_dto_mapper import FilmeDtoMapper
from filmes_api.domain.exceptions import NotFoundError
from filmes_api.domain.ports.repositories.filme_repository import FilmeRepository


class GetFilmeUseCase:
    def __init__(self, filme_repository: FilmeRepository):
        self.filme_repository = filme_repository

    async def execute(self, filme_id: int) -> ReadFilmeDto:
        filme = await self.filme_repository.get_by_id(filme_id)
        if not filme:
            raise NotFoundError(f"Filme with id {filme_id} not found")

        return FilmeDtoMapper.domain_to_read_dto(filme)
