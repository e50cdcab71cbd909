# branding_studio_bot/services/clients/factory.py
from __future__ import annotations
from typing import Any

from .google_ai_client import GoogleGeminiClient
from .mock_ai_client import MockAIClient

_CLIENT_CLASSES: dict[str, type[Any]] = {
    "google": GoogleGeminiClient,
    "mock": MockAIClient,
}


def _create_client_instance(client_name: str) -> Any:
    client_class = _CLIENT_CLASSES.get(client_name)
    if not client_class:
        raise ValueError(f"Unknown client type specified in config: '{client_name}'")
    return client_class()


def get_ai_client(client_name: str) -> Any:
    """
    Creates an AI client instance for a given client name.
    """
    return _create_client_instance(client_name.lower())
