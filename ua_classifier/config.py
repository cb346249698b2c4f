# ua_classifier/config.py

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # HTTP server
    host: str = "0.0.0.0"
    port: int = 5000

    # Logging
    log_level: str = "INFO"

    # Largest array accepted by POST /api/classify
    max_batch_size: int = 1000

    class Config:
        env_file = ".env"
        env_prefix = "UA_"


settings = Settings()
