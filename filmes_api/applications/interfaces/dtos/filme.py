from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class CreateFilmeDto(BaseModel):
    titulo: str = Field(min_length=1, max_length=50, description="Título do filme")
    genero: str = Field(min_length=1, max_length=50, description="Gênero do filme")
    duracao: int = Field(ge=70, le=600, description="Duração em minutos")

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"titulo": "Dune", "genero": "Ficção científica", "duracao": 155}]}
    )


class UpdateFilmeDto(BaseModel):
    titulo: str = Field(min_length=1, max_length=50, description="Título do filme")
    genero: str = Field(min_length=1, max_length=50, description="Gênero do filme")
    duracao: int = Field(ge=70, le=600, description="Duração em minutos")


class ReadFilmeDto(BaseModel):
    id: int
    titulo: str
    genero: str
    duracao: int
    hora_da_consulta: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), serialization_alias="horaDaConsulta"
    )
    model_config = ConfigDict(from_attributes=True)
