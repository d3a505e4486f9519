"""Client singletons for external API interactions."""
from workability.clients.openai_client import OpenAIClient

__all__ = ["OpenAIClient"]
