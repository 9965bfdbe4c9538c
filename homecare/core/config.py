from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    SUPABASE_URL: str | None = None
    SUPABASE_ANON_KEY: str | None = None

    # "memory" or "supabase"; empty means decide from ENV and credentials
    BACKEND_PROVIDER: str = ""
    HTTP_TIMEOUT_SECONDS: float = 10.0

    SITE_NAME: str = "Home Healthcare"
    DEFAULT_LANGUAGE: str = "en"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
