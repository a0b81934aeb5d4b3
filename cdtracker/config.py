from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "CDTRACKER_",
    }

    log_level: str = "INFO"
    timezone: str = "UTC"
    urgent_threshold_days: int = 7
