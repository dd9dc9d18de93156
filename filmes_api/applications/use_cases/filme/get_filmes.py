from typing import List

from filmes_api.applications.interfaces.dtos.filme import ReadFilmeDto
from filmes_api.applications.services.filme_dto_mapper import FilmeDtoMapper
from filmes_api.domain.ports.repositories.filme_repository import FilmeRepository


class GetFilmesUseCase:
    def __init__(self, filme_repository: FilmeRepository):
        self.filme_repository = filme_repository

    async def execute(self) -> List[ReadFilmeDto]:
        filmes = await self.filme_repository.get_all()
        return FilmeDtoMapper.domain_to_read_dtos(filmes)


class GetFilmesPaginadosUseCase:
    def __init__(self, filme_repository: FilmeRepository):
        self.filme_repository = filme_repository

    async def execute(self, skip: int = 0, take: int = 10) -> List[ReadFilmeDto]:
        # Skip/Take semantics: a negative skip starts at the beginning, a non-positive take is empty
        if take <= 0:
            return []

        filmes = await self.filme_repository.get_page(skip=max(skip, 0), take=take)
        return FilmeDtoMapper.domain_to_read_dtos(filmes)
