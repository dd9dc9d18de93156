from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from filmes_api.domain.exceptions import RepositoryError
from filmes_api.domain.models.filme import Filme as DomainFilme
from filmes_api.domain.ports.repositories.filme_repository import FilmeRepository
from filmes_api.infrastructure.persistence.models import Filme as SQLFilme


class SQLAlchemyFilmeRepository(FilmeRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_filme: SQLFilme) -> DomainFilme:
        return DomainFilme(
            id=sql_filme.id,
            titulo=sql_filme.titulo,
            genero=sql_filme.genero,
            duracao=sql_filme.duracao,
        )

    async def _get_row(self, filme_id: int) -> Optional[SQLFilme]:
        return await self.session.scalar(select(SQLFilme).where(SQLFilme.id == filme_id))

    async def get_by_id(self, filme_id: int) -> Optional[DomainFilme]:
        sql_filme = await self._get_row(filme_id)
        return self._to_domain(sql_filme) if sql_filme else None

    async def get_all(self) -> List[DomainFilme]:
        sql_filmes = await self.session.scalars(select(SQLFilme).order_by(SQLFilme.id))
        return [self._to_domain(sql_filme) for sql_filme in sql_filmes.all()]

    async def get_page(self, skip: int = 0, take: int = 10) -> List[DomainFilme]:
        query = select(SQLFilme).order_by(SQLFilme.id).offset(skip).limit(take)
        sql_filmes = await self.session.scalars(query)
        return [self._to_domain(sql_filme) for sql_filme in sql_filmes.all()]

    async def create(self, filme: DomainFilme) -> DomainFilme:
        sql_filme = SQLFilme(
            titulo=filme.titulo,
            genero=filme.genero,
            duracao=filme.duracao,
        )
        self.session.add(sql_filme)
        await self.session.commit()
        await self.session.refresh(sql_filme)
        return self._to_domain(sql_filme)

    async def update(self, filme: DomainFilme) -> DomainFilme:
        if filme.id is None:
            raise RepositoryError("Cannot update a filme without id")

        sql_filme = await self._get_row(filme.id)
        if not sql_filme:
            raise RepositoryError(f"Filme with id {filme.id} not found")

        sql_filme.titulo = filme.titulo
        sql_filme.genero = filme.genero
        sql_filme.duracao = filme.duracao

        await self.session.commit()
        await self.session.refresh(sql_filme)
        return self._to_domain(sql_filme)

    async def delete(self, filme_id: int) -> bool:
        sql_filme = await self._get_row(filme_id)
        if not sql_filme:
            return False

        await self.session.delete(sql_filme)
        await self.session.commit()
        return True
