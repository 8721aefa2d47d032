"""Chat client configuration."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="USTREAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Cloud Functions deployment; use http://localhost:8080 for local development
    base_url: str = "https://us-central1-your-project.cloudfunctions.net/chatbot"
    chat_timeout_seconds: float = 30.0
    json_logs: bool = False
    log_level: str = "INFO"


_settings: ClientSettings | None = None


def get_settings() -> ClientSettings:
    global _settings
    if _settings is None:
        _settings = ClientSettings()
    return _settings
