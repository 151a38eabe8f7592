from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Argon2id cost parameters (defaults match CostParameters.default())
    ARGON2_MEMORY_KIB: int = Field(default=4096, gt=0, lt=2**32)
    ARGON2_ITERATIONS: int = Field(default=10, gt=0, lt=2**32)
    ARGON2_PARALLELISM: int = Field(default=2, gt=0, le=255)
    ARGON2_SALT_LENGTH: int = Field(default=32, gt=0, lt=2**32)
    ARGON2_KEY_LENGTH: int = Field(default=64, gt=0, lt=2**32)


settings = Settings()
