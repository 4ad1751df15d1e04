from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///:memory:"
    db_echo: bool = False

    host: str = "127.0.0.1"
    port: int = 3000

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
