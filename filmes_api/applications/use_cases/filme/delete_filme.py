from filmes_api.domain.exceptions import NotFoundError
from filmes_api.domain.ports.repositories.filme_repository import FilmeRepository


class DeleteFilmeUseCase:
    def __init__(self, filme_repository: FilmeRepository):
        self.filme_repository = filme_repository

    async def execute(self, filme_id: int) -> None:
        existing_filme = await self.filme_repository.get_by_id(filme_id)
        if not existing_filme:
            raise NotFoundError(f"Filme with id {filme_id} not found")

        success = await self.filme_repository.delete(filme_id)
        if not success:
            raise RuntimeError(f"Failed to delete filme with id {filme_id}")
