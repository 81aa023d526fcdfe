import pytest
from pydantic import ValidationError

from letter_enhancer.config.settings import Settings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.chdir(tmp_path)
    for name in (
        "WEBHOOK_URL",
        "MAX_FILE_SIZE_BYTES",
        "SUPPORTED_FORMATS",
        "REQUEST_TIMEOUT_MS",
        "PDF_ENGINE",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_webhook_url_is_unset(self) -> None:
        s = Settings()
        assert s.webhook_url == ""

    def test_default_max_file_size(self) -> None:
        s = Settings()
        assert s.max_file_size_bytes == 2 * 1024 * 1024

    def test_default_supported_formats(self) -> None:
        s = Settings()
        assert s.supported_format_list == [".txt", ".md", ".pdf", ".docx"]

    def test_default_timeouts(self) -> None:
        s = Settings()
        assert s.request_timeout_ms == 30000
        assert s.notification_timeout_ms == 5000

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_feature_flags_enabled(self) -> None:
        s = Settings()
        assert s.enable_diff_view
        assert s.enable_file_upload
        assert s.enable_download_feature


class TestSettingsFromEnv:
    def test_loads_webhook_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEBHOOK_URL", "https://hooks.example.com/letter")
        s = Settings()
        assert s.webhook_url == "https://hooks.example.com/letter"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_normalizes_supported_formats(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SUPPORTED_FORMATS", "TXT, .pdf,,pdf")
        s = Settings()
        assert s.supported_format_list == [".txt", ".pdf"]

    def test_loads_feature_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENABLE_DIFF_VIEW", "false")
        s = Settings()
        assert s.enable_diff_view is False

    def test_reads_dotenv_file(self, tmp_path) -> None:  # type: ignore[no-untyped-def]
        (tmp_path / ".env").write_text("WEBHOOK_URL=https://from-dotenv.example.com\n")
        s = Settings()
        assert s.webhook_url == "https://from-dotenv.example.com"


class TestSettingsValidation:
    def test_invalid_max_file_size_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_FILE_SIZE_BYTES", "two megabytes")
        with pytest.raises(ValidationError):
            Settings()

    def test_non_positive_timeout_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQUEST_TIMEOUT_MS", "0")
        with pytest.raises(ValidationError):
            Settings()
