from filmes_api.applications.interfaces.dtos.filme import CreateFilmeDto, ReadFilmeDto
from filmes_api.applications.services.filme_dto_mapper import FilmeDtoMapper
from filmes_api.domain.ports.repositories.filme_repository import FilmeRepository
from filmes_api.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateFilmeUseCase:
    def __init__(self, filme_repository: FilmeRepository):
        self.filme_repository = filme_repository

    async def execute(self, filme_data: CreateFilmeDto) -> ReadFilmeDto:
        logger.info(f"Creating filme: {filme_data.titulo}")

        filme = FilmeDtoMapper.create_dto_to_domain(filme_data)
        created_filme = await self.filme_repository.create(filme)

        if created_filme.id is None:
            raise RuntimeError("Filme creation failed - no ID assigned")

        logger.info(f"Filme created successfully: {created_filme.id}")
        return FilmeDtoMapper.domain_to_read_dto(created_filme)
