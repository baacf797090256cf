from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    APP_NAME: str = "CareerGraph"
    APP_ENV: str = "dev"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    SECRET_KEY: str = "change_me_please"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # SQLite connection string (read from .env)
    DATABASE_URL: str = "sqlite:///./careergraph.db"

    BACKEND_CORS_ORIGINS: str = "http://localhost:5173"

    # OpenAI-compatible chat completions gateway
    LLM_API_URL: str = "https://ai.gateway.lovable.dev/v1"
    LLM_API_KEY: str | None = None
    LLM_MODEL: str = "google/gemini-3-flash-preview"
    LLM_TIMEOUT: int = 30

    # "keywords" (LLM keywords + hashing) or "sentence-transformers"
    EMBEDDING_BACKEND: str = "keywords"
    EMBEDDING_MODEL: str = "sentence-transformers/all-mpnet-base-v2"
    EMBEDDING_DIM: int = 768
    EMBEDDING_MAX_CHARS: int = 3000
    EMBEDDING_KEYWORDS: int = 50

    MATCH_RESULT_LIMIT: int = 50
    MATCH_WORKERS: int = 1

    SEED_DELAY_SECONDS: float = 0.2
    SEED_JOBS_ON_STARTUP: bool = False

settings = Settings()
