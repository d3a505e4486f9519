"""
Singleton OpenAI client for workspace recommendations, rate limited with aiolimiter.
"""
import json
import os
from typing import Any, Dict

from aiolimiter import AsyncLimiter
from openai import AsyncOpenAI
from loguru import logger

from workability.config import OPENAI_API_KEY, OPENAI_MODEL, CONCURRENCY

RECOMMENDATION_TEMPERATURE = 0.8
RECOMMENDATION_MAX_TOKENS = 1000


class OpenAIClient:
    """
    Singleton OpenAI client. Every request shares one token-bucket rate limiter
    and the JSON-mode settings the recommendation prompts rely on.
    """
    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not OpenAIClient._initialized:
            api_key = OPENAI_API_KEY or os.getenv("OPENAI_API_KEY")
            if not api_key:
                raise ValueError("OPENAI_API_KEY must be set in environment or config")

            self.client = AsyncOpenAI(api_key=api_key)
            self.model = OPENAI_MODEL
            # Token bucket: CONCURRENCY requests per second
            self.rate_limiter = AsyncLimiter(max_rate=CONCURRENCY, time_period=1.0)
            OpenAIClient._initialized = True

    async def json_completion(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = RECOMMENDATION_TEMPERATURE,
        max_tokens: int = RECOMMENDATION_MAX_TOKENS,
    ) -> Dict[str, Any]:
        """
        Run a JSON-mode chat completion and decode the reply.

        Args:
            system_prompt: Persona and output-format instructions.
            user_prompt: The place listing and requested JSON structure.
            temperature: Sampling temperature.
            max_tokens: Completion token cap.

        Returns:
            Dict[str, Any]: The decoded JSON object.

        Raises:
            ValueError: The reply is empty, not valid JSON, or not a JSON object.
        """
        async with self.rate_limiter:
            try:
                resp = await self.client.chat.completions.create(
                    model=self.model,
                    messages=[
                        {"role": "system", "content": system_prompt},
                        {"role": "user", "content": user_prompt},
                    ],
                    temperature=temperature,
                    max_tokens=max_tokens,
                    response_format={"type": "json_object"},
                )
            except Exception as e:
                logger.debug(f"⚠️ OpenAI API request failed: {e}")
                raise

        content = resp.choices[0].message.content
        if not content:
            raise ValueError("OpenAI returned an empty completion")
        payload = json.loads(content)
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")
        return payload
