from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    # App
    APP_NAME: str = "BFHL API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    OFFICIAL_EMAIL: str = "YOUR CHITKARA EMAIL"

    # HTTP surface
    MAX_BODY_BYTES: int = 10 * 1024
    CORS_ALLOW_ORIGINS: str = "*"

    # Input bounds
    MAX_FIBONACCI_TERMS: int = 10000
    MAX_ARRAY_LENGTH: int = 10000
    MAX_AI_QUESTION_LENGTH: int = 1000

    # Gemini
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com"
    AI_MAX_RETRIES: int = 2
    AI_RETRY_BASE_DELAY_MS: int = 600
    # None keeps the outbound call unbounded
    AI_REQUEST_TIMEOUT_SECONDS: float | None = None

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        """Split CORS_ALLOW_ORIGINS into a list of origins."""
        return [origin.strip() for origin in self.CORS_ALLOW_ORIGINS.split(",") if origin.strip()]

@lru_cache()
def get_settings() -> Settings:
    return Settings()
