from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, registry

table_registry = registry()


@table_registry.mapped_as_dataclass
class Filme:
    __tablename__ = "filmes"

    id: Mapped[int] = mapped_column(init=False, primary_key=True)
    titulo: Mapped[str] = mapped_column(String(50))
    genero: Mapped[str] = mapped_column(String(50))
    duracao: Mapped[int]
