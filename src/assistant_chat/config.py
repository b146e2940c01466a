import os
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_parse_none_str="none",
    )

    # OpenAI Assistants (Load keys securely)
    openai_api_key: str | None = os.getenv("OPENAI_API_KEY")
    openai_assistant_id: str | None = os.getenv("OPENAI_ASSISTANT_ID")

    # Thread handling
    thread_id_prefix: str = os.getenv("THREAD_ID_PREFIX", "thread_")
    poll_interval_seconds: float = float(os.getenv("POLL_INTERVAL_SECONDS", "1.0"))
    # None disables the bound and polls until the run leaves the transient states.
    # MAX_POLL_ATTEMPTS=none, 0 or an empty value all mean unbounded.
    max_poll_attempts: int | None = 600

    # Client side
    chat_api_url: str = os.getenv("CHAT_API_URL", "http://127.0.0.1:8000")
    thread_store_path: str = os.getenv("THREAD_STORE_PATH", "./.chat_state.json")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "app.log")

    @field_validator("max_poll_attempts", mode="before")
    @classmethod
    def unbounded_when_blank_or_zero(cls, value):
        if value is None:
            return None
        if isinstance(value, str) and value.strip() in ("", "0"):
            return None
        if value == 0:
            return None
        return value


# Create a single settings instance for the application
settings = Settings()
