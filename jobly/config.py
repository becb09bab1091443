from pydantic_settings import BaseSettings

# Shipped defaults; fine on a laptop, never in production.
PLACEHOLDER_SECRET_KEY = "replace-with-a-long-random-secret-key"
PLACEHOLDER_DB_CREDENTIALS = "username:password@"

PRODUCTION_ENVS = {"production", "prod"}


class Settings(BaseSettings):
    # Override from environment (.env / deployment secrets)
    database_url: str = f"postgresql://{PLACEHOLDER_DB_CREDENTIALS}localhost:5432/jobly"
    secret_key: str = PLACEHOLDER_SECRET_KEY
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24  # 1 day
    app_env: str = "development"  # development, staging, production

    # CORS origins as comma-separated values
    # Example: "https://app.example.com,https://admin.example.com"
    cors_allow_origins: str = "http://localhost:3000"

    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    # Log every SQL statement issued by the engine
    db_echo: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def is_production(self) -> bool:
        return (self.app_env or "development").strip().lower() in PRODUCTION_ENVS

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]

    def placeholder_problems(self) -> list[str]:
        """Human-readable notes for every setting still at its shipped default."""
        problems = []
        if self.secret_key == PLACEHOLDER_SECRET_KEY:
            problems.append("SECRET_KEY is the placeholder default")
        if PLACEHOLDER_DB_CREDENTIALS in self.database_url:
            problems.append("DATABASE_URL uses placeholder credentials")
        return problems


settings = Settings()
