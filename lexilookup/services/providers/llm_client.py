"""OpenAI-compatible chat client shared by the generative providers."""

import logging

import openai
from openai import OpenAI

from lexilookup.config import LexiLookupConfig
from lexilookup.exceptions import ProviderError, ProviderUnavailableError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a dictionary API. Reply with a single JSON object and nothing else."


def create_llm_client(config: LexiLookupConfig) -> OpenAI | None:
    """Create the chat client from configuration.

    SDK-level retries are disabled; retrying is owned by the RetryExecutor.

    Args:
        config: Configuration holding the generative credential and endpoint

    Returns:
        OpenAI client, or None when no API key is configured
    """
    if not config.has_generative_credentials:
        return None

    return OpenAI(
        api_key=config.generative_api_key,
        base_url=config.generative_base_url or None,
        timeout=config.request_timeout,
        max_retries=0,
    )


def request_completion(client: OpenAI, model: str, prompt: str) -> str:
    """Send one prompt and return the model's text.

    Args:
        client: Chat client
        model: Model name
        prompt: User prompt

    Returns:
        Raw text content of the first choice (may be empty)

    Raises:
        ProviderUnavailableError: On authentication or permission failures
        ProviderError: On any other API failure (non-retryable for bad requests)
    """
    try:
        response = client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
        )
    except (openai.AuthenticationError, openai.PermissionDeniedError) as e:
        raise ProviderUnavailableError(
            f"Generative API rejected the credential: {e}", status_code=e.status_code
        ) from e
    except (openai.BadRequestError, openai.NotFoundError, openai.UnprocessableEntityError) as e:
        raise ProviderError(
            f"Generative API rejected the request: {e}", retryable=False, status_code=e.status_code
        ) from e
    except openai.APIStatusError as e:
        raise ProviderError(f"Generative API error: {e}", status_code=e.status_code) from e
    except openai.APIConnectionError as e:
        raise ProviderError(f"Generative API connection failed: {e}") from e

    if not response.choices:
        return ""
    return (response.choices[0].message.content or "").strip()
