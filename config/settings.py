from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Snowflake: node id has no default, MUST be assigned per node in .env
    SNOWFLAKE_NODE_ID: int
    SNOWFLAKE_EPOCH_MS: int = 0  # 0 = built-in default epoch
    SNOWFLAKE_DRIFT_TOLERANCE_MS: int = 5
    SNOWFLAKE_DRIFT_COMPENSATION_FACTOR: int = 2

    # API
    ID_BATCH_MAX: int = 1000

    # App
    APP_NAME: str = "Snowflake ID Service"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev
    LOG_LEVEL: str = "INFO"


settings = Settings()
