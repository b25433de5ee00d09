"""
Settings for tinymysql, read from environment variables (or a ``.env`` file).

Connection defaults are used when ``ConnectionOptions`` leaves a value out.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    DB_HOSTNAME: str = "localhost"
    DB_USERNAME: str = "root"
    DB_PASSWORD: str = ""
    DB_DATABASE: str = ""
    DB_PORT: int = 3306
    DB_SOCKET: str | None = None
    DB_CHARSET: str = "utf8mb4"

    # Seconds; passed to the driver as connect_timeout
    DB_CONNECT_TIMEOUT: int = 10
    # Seconds; when set, applied as max_execution_time around each statement
    DB_STATEMENT_TIMEOUT: float | None = None


settings = Settings()
