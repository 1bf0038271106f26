"""OpenAI client for translation."""

import openai
from openai import OpenAI
from typing import Optional

from ...errors import ServiceError
from ...languages import display_name
from ...logger import get_logger
from .base import AUTO_DETECT, TranslationService

logger = get_logger(__name__)


class OpenAIClient(TranslationService):
    """Client for OpenAI chat-completion translation."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        temperature: float = 0.3,
        client: Optional[OpenAI] = None,
    ):
        """
        Initialize the OpenAI client.

        Args:
            api_key: OpenAI API key
            model: Chat model used for translation
            temperature: Sampling temperature
            client: Preconfigured OpenAI client (built from api_key if omitted)
        """
        if not api_key and client is None:
            raise ValueError("OpenAI API key is required")
        self.client = client or OpenAI(api_key=api_key)
        self.model = model
        self.temperature = temperature

    def translate_text(
        self,
        text: str,
        target_language: str,
        source_language: str = AUTO_DETECT,
    ) -> str:
        system_prompt = self._build_system_prompt(target_language, source_language)

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": text},
                ],
                temperature=self.temperature,
            )
        except openai.OpenAIError as e:
            raise self._to_service_error(e) from e

        content = response.choices[0].message.content
        if content is None:
            raise ServiceError(
                "OpenAI returned an empty response",
                code="empty_response",
                details={"provider": "openai"},
            )

        return self._clean_response(content.strip())

    def _build_system_prompt(self, target_language: str, source_language: str) -> str:
        """Build the system prompt for translation."""
        target_name = display_name(target_language)
        if source_language and source_language != AUTO_DETECT:
            direction = f"from {display_name(source_language)} to {target_name}"
        else:
            direction = f"to {target_name}"

        return f"""You are an expert software localization translator.
Translate the user's message {direction}.

CRITICAL RULES - FOLLOW EXACTLY:
1. Preserve .NET format items EXACTLY as they appear: {{0}}, {{1}}, {{0:N2}}, {{1,-10}}
2. Preserve HTML tags and entities exactly; translate only the text between them.
3. Keep translations concise - UI strings have limited space.
4. Respond with ONLY the translated text, nothing else.
   - No quotes around the translation
   - No explanations or notes
   - No "Translation:" prefix"""

    def _clean_response(self, response: str) -> str:
        """Clean up common GPT formatting issues."""
        # Remove surrounding quotes if present
        if len(response) >= 2 and (
            (response.startswith('"') and response.endswith('"'))
            or (response.startswith("'") and response.endswith("'"))
        ):
            response = response[1:-1]

        prefixes_to_remove = [
            "Translation:",
            "Translated:",
            "Here is the translation:",
            "The translation is:",
        ]
        for prefix in prefixes_to_remove:
            if response.lower().startswith(prefix.lower()):
                response = response[len(prefix):].strip()

        return response

    def _to_service_error(self, error: openai.OpenAIError) -> ServiceError:
        if isinstance(error, openai.AuthenticationError):
            code, retryable = "authorization", False
        elif isinstance(error, openai.RateLimitError):
            code, retryable = "rate_limited", True
        elif isinstance(error, openai.APIConnectionError):
            code, retryable = "connection", True
        else:
            code, retryable = "service", False

        logger.debug("OpenAI call failed (%s): %s", code, error)
        return ServiceError(
            str(error),
            code=code,
            details={"provider": "openai", "exception": type(error).__name__},
            retryable=retryable,
        )
