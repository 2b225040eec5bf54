from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    DEBUG: bool = False  # Enables @Logger.io call tracing
    LOG_TO_FILE: bool = False  # Rotating file sink under LOG_DIR

    # Hashing
    BCRYPT_ROUNDS: int = 12

    @field_validator('BCRYPT_ROUNDS')
    @classmethod
    def check_bcrypt_rounds(cls, v: int) -> int:
        if not 4 <= v <= 31:
            raise ValueError('BCRYPT_ROUNDS must be between 4 and 31')
        return v

    # Database
    DATABASE_URL: str = 'sqlite://'
    DATABASE_ECHO: bool = False


settings = Settings()  # type: ignore
