from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    webhook_url: str = ""
    request_timeout_ms: int = Field(30000, gt=0)

    max_file_size_bytes: int = Field(2 * 1024 * 1024, gt=0)
    # Comma-separated to keep the dotenv provider from JSON-decoding it
    supported_formats: str = ".txt,.md,.pdf,.docx"
    pdf_engine: str = "pdfplumber"

    notification_timeout_ms: int = Field(5000, ge=0)

    enable_diff_view: bool = True
    enable_file_upload: bool = True
    enable_download_feature: bool = True

    @property
    def supported_format_list(self) -> list[str]:
        """Supported extensions, lower-cased and dot-prefixed."""
        formats: list[str] = []
        for token in self.supported_formats.split(","):
            token = token.strip().lower()
            if not token:
                continue
            if not token.startswith("."):
                token = f".{token}"
            if token not in formats:
                formats.append(token)
        return formats
