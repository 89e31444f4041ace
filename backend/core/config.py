import json
from typing import Annotated, List, Optional
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import validator

class Settings(BaseSettings):
    PROJECT_NAME: str = "Petclinic"

    # Security
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []

    POSTGRES_USER: str = "petclinic"
    POSTGRES_PASSWORD: str = "petclinic"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "petclinic"
    POSTGRES_DRIVER: str = "postgresql+asyncpg"

    # Overrides the assembled Postgres URL, e.g. sqlite+aiosqlite:///./petclinic.db
    DATABASE_URL: Optional[str] = None

    OWNERS_PAGE_SIZE: int = 5
    SEED_DATA: bool = True
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env.local",
        extra="ignore",
    )

    @validator("BACKEND_CORS_ORIGINS", pre=True)
    def assemble_cors_origins(cls, v: Optional[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, str):
            return json.loads(v)
        if isinstance(v, list):
            return v
        return []

    @property
    def POSTGRES_URL(self) -> str:
        return f"{self.POSTGRES_DRIVER}://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    @property
    def SQLALCHEMY_DATABASE_URL(self) -> str:
        return self.DATABASE_URL or self.POSTGRES_URL


settings = Settings()

def get_application_info():
    return {
        "project_name": settings.PROJECT_NAME,
        "database_url": settings.SQLALCHEMY_DATABASE_URL,
        "cors_origins": settings.BACKEND_CORS_ORIGINS,
        "owners_page_size": settings.OWNERS_PAGE_SIZE,
    }

if __name__ == "__main__":
    info = get_application_info()
    print(f"Project: {info['project_name']}")
    print(f"Database URL: {info['database_url']}")
    print(f"CORS Origins: {info['cors_origins']}")
    print(f"Owners page size: {info['owners_page_size']}")
