from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str
    CREATE_TABLES: bool = True


class ApiSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="API_", extra="ignore")

    title: str = "FilmesAPI"
    version: str = "v1"
    description: str = "Cadastro de filmes: inclusão, consulta, paginação, atualização e remoção."
    root_path: str = ""
