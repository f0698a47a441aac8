"""Clients for external service communication."""

from clients.base_client import ServiceClient
from clients.llm_client import LlmApiClient

__all__ = [
    "ServiceClient",
    "LlmApiClient",
]
