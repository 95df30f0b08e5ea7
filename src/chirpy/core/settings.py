"""Application settings and configuration.

This module defines all configuration options for the Chirpy application.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or a .env file.
    """

    # Application metadata
    app_name: str = Field(default="Chirpy", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # JSON document backing the chirps and users tables
    database_path: str = Field(default="database.json", alias="DATABASE_PATH")

    # JWT session tokens
    jwt_secret: str = Field(alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_issuer: str = Field(default="chirpy", alias="JWT_ISSUER")
    default_token_lifetime_seconds: int = Field(
        default=90,
        alias="DEFAULT_TOKEN_LIFETIME_SECONDS",
    )

    # Password hashing cost (bcrypt log rounds)
    bcrypt_rounds: int = Field(default=12, ge=4, le=31, alias="BCRYPT_ROUNDS")

    # Chirp body rules
    chirp_max_length: int = Field(default=140, alias="CHIRP_MAX_LENGTH")
    profane_words: list[str] = Field(
        default=["kerfuffle", "sharbert", "fornax"],
        alias="PROFANE_WORDS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def profane_word_set(self) -> frozenset[str]:
        """Return the configured profane words lower-cased for lookups."""
        return frozenset(word.lower() for word in self.profane_words)


settings = Settings()  # type: ignore[call-arg]
