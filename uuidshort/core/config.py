from pydantic_settings import BaseSettings

from uuidshort.utils.encoding import DEFAULT_ALPHABET

class Settings(BaseSettings):
    PROJECT_NAME: str = "Short UUID"

    # Symbols used for every short id this service hands out
    ALPHABET: str = DEFAULT_ALPHABET
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "SHORTUUID_"

settings = Settings()
