from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    OPENAI_API_KEY: str | None = None

    OPENAI_MODEL_REPLY: str = "gpt-4o-mini"
    OPENAI_TEMPERATURE_REPLY: float = 0.7
    OPENAI_MAX_TOKENS: int = 1000
    COMPLETION_TIMEOUT_SECONDS: float = 30.0

    CONTACT_WEBHOOK_URL: str | None = None
    CONTACT_ROUTING_ID: str = ""
    CONTACT_WEBHOOK_TIMEOUT_SECONDS: float = 10.0

    KNOWLEDGE_DIR: str | None = None

    STORE_PROVIDER: str = "memory"  # "memory" | "json"
    STORE_DATA_DIR: str = "./data/sessions"
    HISTORY_LIMIT: int = 200

    BUSINESS_NAME: str = "Axie Studio"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
