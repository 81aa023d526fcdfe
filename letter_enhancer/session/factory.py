from letter_enhancer.config.settings import Settings
from letter_enhancer.enhancement.client_base import BaseSubmissionClient
from letter_enhancer.enhancement.webhook_client import WebhookSubmissionClient
from letter_enhancer.extraction.factory import build_file_text_extractor
from letter_enhancer.session.enhancement_session import EnhancementSession
from letter_enhancer.session.input_normalizer import InputNormalizer
from letter_enhancer.session.presenter import BasePresenter


def build_session(
    settings: Settings,
    presenter: BasePresenter,
    client: BaseSubmissionClient | None = None,
) -> EnhancementSession:
    """Build an EnhancementSession with all required collaborators."""
    return EnhancementSession(
        normalizer=InputNormalizer(),
        extractor=build_file_text_extractor(settings),
        client=client if client is not None else WebhookSubmissionClient(),
        presenter=presenter,
        endpoint=settings.webhook_url,
        timeout_ms=settings.request_timeout_ms,
        enable_diff_view=settings.enable_diff_view,
        enable_file_upload=settings.enable_file_upload,
    )
