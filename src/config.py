from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"
    cors_allow_origins: list[str] = ["*"]

    # Dashboard
    api_base: str = "http://localhost:8000"
    dashboard_port: int = 8050

    # Rate tables live in src.engine.insurance; pricing is not configurable here.


settings = Settings()
