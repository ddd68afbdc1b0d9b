from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./vehicles.db"
    pricing_url: str = "http://localhost:8082"
    maps_url: str = "http://localhost:9191"
    # seconds, applied to every provider request
    provider_timeout: float = 5.0
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "allow"


settings = Settings()
