import pytest

from filmes_api.domain.exceptions import RepositoryError
from filmes_api.infrastructure.adapters.repositories.sqlalchemy_filme_repository import (
    SQLAlchemyFilmeRepository,
)

from .conftest import BaseIntegrationTest
from .factories import filme_factory


class TestSQLAlchemyFilmeRepository(BaseIntegrationTest):
    """Integration tests for SQLAlchemy filme repository"""

    @pytest.fixture
    def filme_repository(self, db_session):
        return SQLAlchemyFilmeRepository(db_session)

    @pytest.mark.asyncio
    async def test_create_filme(self, filme_repository):
        created = await filme_repository.create(filme_factory.create_domain_filme())

        assert created.id is not None
        assert created.titulo == "Dune"
        assert created.duracao == 155

    @pytest.mark.asyncio
    async def test_get_by_id(self, filme_repository):
        created = await filme_repository.create(filme_factory.create_domain_filme(titulo="Alien"))

        found = await filme_repository.get_by_id(created.id)

        assert found == created

    @pytest.mark.asyncio
    async def test_get_by_id_reads_rows_added_outside_repository(self, filme_repository, db_session):
        row = filme_factory.create_sql_filme(titulo="Metropolis", duracao=153)
        db_session.add(row)
        await db_session.commit()

        found = await filme_repository.get_by_id(row.id)

        assert found is not None
        assert found.titulo == "Metropolis"

    @pytest.mark.asyncio
    async def test_get_all_is_ordered_by_id(self, filme_repository):
        for titulo in ["c", "a", "b"]:
            await filme_repository.create(filme_factory.create_domain_filme(titulo=titulo))

        filmes = await filme_repository.get_all()

        assert [filme.titulo for filme in filmes] == ["c", "a", "b"]
        assert [filme.id for filme in filmes] == sorted(filme.id for filme in filmes)

    @pytest.mark.asyncio
    async def test_get_page(self, filme_repository):
        for i in range(5):
            await filme_repository.create(filme_factory.create_domain_filme(titulo=f"filme{i}"))

        page = await filme_repository.get_page(skip=1, take=3)
        tail = await filme_repository.get_page(skip=4, take=10)

        assert [filme.titulo for filme in page] == ["filme1", "filme2", "filme3"]
        assert [filme.titulo for filme in tail] == ["filme4"]

    @pytest.mark.asyncio
    async def test_update_filme(self, filme_repository):
        created = await filme_repository.create(filme_factory.create_domain_filme())

        created.titulo = "Duna"
        updated = await filme_repository.update(created)

        assert updated.id == created.id
        assert (await filme_repository.get_by_id(created.id)).titulo == "Duna"

    @pytest.mark.asyncio
    async def test_update_missing_filme(self, filme_repository):
        with pytest.raises(RepositoryError):
            await filme_repository.update(filme_factory.create_domain_filme(id=999))

    @pytest.mark.asyncio
    async def test_delete_filme(self, filme_repository):
        created = await filme_repository.create(filme_factory.create_domain_filme())

        assert await filme_repository.delete(created.id) is True
        assert await filme_repository.get_by_id(created.id) is None
        assert await filme_repository.delete(created.id) is False

    @pytest.mark.asyncio
    async def test_filme_not_found(self, filme_repository):
        assert await filme_repository.get_by_id(999) is None
