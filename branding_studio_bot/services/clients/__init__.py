# branding_studio_bot/services/clients/__init__.py
from .factory import get_ai_client
from .google_ai_client import GoogleGeminiClient, GoogleGeminiClientResponse
from .mock_ai_client import MockAIClient, MockAIClientResponse

__all__ = [
    "GoogleGeminiClient",
    "GoogleGeminiClientResponse",
    "MockAIClient",
    "MockAIClientResponse",
    "get_ai_client",
]
