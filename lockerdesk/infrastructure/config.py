from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LOCKERDESK_")

    database_url: str = "sqlite+pysqlite:///:memory:"
    openapi_path: Path = Path(__file__).resolve().parents[1] / "openapi/openapi.yaml"
    log_level: str = "INFO"
    # write a MOVE entry to the locker log when a locker is relocated
    log_locker_moves: bool = True


settings = Settings()
