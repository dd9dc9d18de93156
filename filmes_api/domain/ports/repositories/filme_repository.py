from abc import ABC, abstractmethod
from typing import List, Optional

from filmes_api.domain.models.filme import Filme


class FilmeRepository(ABC):
    @abstractmethod
    async def get_by_id(self, filme_id: int) -> Optional[Filme]:
        pass

    @abstractmethod
    async def get_all(self) -> List[Filme]:
        pass

    @abstractmethod
    async def get_page(self, skip: int = 0, take: int = 10) -> List[Filme]:
        pass

    @abstractmethod
    async def create(self, filme: Filme) -> Filme:
        pass

    @abstractmethod
    async def update(self, filme: Filme) -> Filme:
        pass

    @abstractmethod
    async def delete(self, filme_id: int) -> bool:
        pass
