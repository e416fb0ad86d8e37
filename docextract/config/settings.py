from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    port: int = 3000
    client_port: int = 5173
    upload_dir: Path = Path("uploads")

    extraction_models: list[str] = ["gpt-4-turbo", "gpt-4o-mini", "gpt-4o"]
    extraction_max_tokens: int = 1000
    attempt_log_path: Path = Path("model_logs.txt")

    rasterizer_engine: str = "pymupdf"
    render_viewport_width: int = 1200
    render_viewport_height: int = 1600
    render_browser_sandbox: bool = True
    render_browser_channel: str = "chromium"

    inference_provider: str = "openai"
    inference_base_url: str | None = None
    openai_api_key: str = ""
    openai_timeout_seconds: int = 60
