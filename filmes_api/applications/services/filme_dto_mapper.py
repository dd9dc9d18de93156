from typing import List

from filmes_api.applications.interfaces.dtos.filme import CreateFilmeDto, ReadFilmeDto, UpdateFilmeDto
from filmes_api.domain.models.filme import Filme


class FilmeDtoMapper:
    """Field-by-field conversions between Filme and its transfer objects"""

    @staticmethod
    def create_dto_to_domain(dto: CreateFilmeDto) -> Filme:
        return Filme(titulo=dto.titulo, genero=dto.genero, duracao=dto.duracao)

    @staticmethod
    def domain_to_read_dto(filme: Filme) -> ReadFilmeDto:
        if filme.id is None:
            raise ValueError("Cannot project a filme that has no id")

        return ReadFilmeDto(id=filme.id, titulo=filme.titulo, genero=filme.genero, duracao=filme.duracao)

    @staticmethod
    def domain_to_read_dtos(filmes: List[Filme]) -> List[ReadFilmeDto]:
        return [FilmeDtoMapper.domain_to_read_dto(filme) for filme in filmes]

    @staticmethod
    def domain_to_update_dto(filme: Filme) -> UpdateFilmeDto:
        # unvalidated; the patched result is validated by FilmePatchService
        return UpdateFilmeDto.model_construct(titulo=filme.titulo, genero=filme.genero, duracao=filme.duracao)

    @staticmethod
    def apply_update_dto(dto: UpdateFilmeDto, filme: Filme) -> Filme:
        """Overwrite the mutable fields of ``filme`` in place; the id is left untouched"""
        filme.titulo = dto.titulo
        filme.genero = dto.genero
        filme.duracao = dto.duracao
        return filme
