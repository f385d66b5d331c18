from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Legal Aid Case Progress"
    database_url: str = ""
    log_level: str = "INFO"
    optional_weight_factor: float = 0.5

    model_config = {"env_file": ".env"}


settings = Settings()
