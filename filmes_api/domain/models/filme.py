from typing import Optional

from pydantic import BaseModel


class Filme(BaseModel):
    titulo: str
    genero: str
    duracao: int
    id: Optional[int] = None
