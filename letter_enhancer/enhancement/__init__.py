from letter_enhancer.enhancement.client_base import BaseSubmissionClient
from letter_enhancer.enhancement.response_decoder import decode_response
from letter_enhancer.enhancement.webhook_client import WebhookSubmissionClient

__all__ = ["BaseSubmissionClient", "WebhookSubmissionClient", "decode_response"]
