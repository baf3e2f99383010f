from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_name: str = "modelgen"

    database_url: str | None = None

    directory_mode: int = 0o777
    file_encoding: str = "utf-8"

    log_level: str = "INFO"

    @field_validator("directory_mode", mode="before")
    @classmethod
    def parse_octal_mode(cls, value):
        # Modes come from the environment as "0755", "755" or "0o755"
        if isinstance(value, str):
            return int(value.strip().lower().removeprefix("0o"), 8)
        return value

settings = Settings()
