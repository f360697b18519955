"""Configuration management using pydantic-settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    host: str = "0.0.0.0"
    port: int = 8800
    log_level: str = "INFO"
    graphql_path: str = "/graphql2"

    # CORS is permissive by default
    cors_origins: list[str] = ["*"]
    cors_methods: list[str] = ["GET", "POST", "DELETE", "PUT"]
    cors_headers: list[str] = ["Content-Type", "Authorization"]

    # JWT Configuration
    # Required, from JWT_SECRET_KEY or .env; startup fails without it
    jwt_secret_key: str = Field(..., min_length=32)
    jwt_algorithm: str = "HS256"
    jwt_issuer: str = "bes"
    jwt_expiry_hours: int = 1

    # Bcrypt work factor (higher = more secure but slower)
    # For tests, use 4 for faster execution while maintaining functionality
    bcrypt_work_factor: int = 10
    password_min_length: int = 4

    # Load the two demo authors and the demo article on startup
    seed_demo_data: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )

    @field_validator("jwt_algorithm")
    @classmethod
    def algorithm_is_hmac(cls, v: str) -> str:
        """Tokens are signed with a shared secret, so only HMAC algorithms apply."""
        v = v.upper()
        if v not in HMAC_ALGORITHMS:
            raise ValueError(f"jwt_algorithm must be one of {', '.join(HMAC_ALGORITHMS)}")
        return v


settings = Settings()
