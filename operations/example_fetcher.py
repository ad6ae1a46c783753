import logging
import os
import threading
from dataclasses import dataclass
from typing import Callable, Optional

import requests

import config
from operations.vocabulary import WordCard

logger = logging.getLogger(__name__)


class MissingCredentialError(RuntimeError):
    """Raised at startup when the API key is not set."""


@dataclass
class FetchResult:
    index: int
    example: str = ""
    error: Optional[str] = None


def get_api_key(env_var: str = config.api_key_env) -> str:
    api_key = os.environ.get(env_var, "")
    if not api_key:
        raise MissingCredentialError(f"{env_var} not set in environment variables")
    return api_key


def build_prompt(word: WordCard) -> str:
    return config.prompt_template.format(chinese=word.chinese)


class ExampleFetcher:
    """Fetches example sentences from an OpenAI compatible chat completions API.

    ``fetch`` runs the request on a background thread and hands the
    resulting FetchResult to ``post``. Failures are reported as results
    with ``error`` set, never raised.
    """

    def __init__(
        self,
        api_key: str,
        post: Optional[Callable[[FetchResult], None]] = None,
        model: str = config.model,
        api_url: str = config.api_url,
        timeout: float = config.request_timeout,
    ):
        self.api_key = api_key
        self.post = post
        self.model = model
        self.api_url = api_url
        self.timeout = timeout

    def fetch(self, word: WordCard, index: int) -> threading.Thread:
        if self.post is None:
            raise RuntimeError("ExampleFetcher.post must be set before fetching")
        post = self.post

        def run():
            try:
                result = self.request_example(word, index)
            except Exception as e:
                logger.exception("Example fetch for card %d crashed", index)
                result = FetchResult(index=index, error=str(e) or type(e).__name__)
            post(result)

        thread = threading.Thread(target=run, name=f"fetch-example-{index}", daemon=True)
        thread.start()
        return thread

    def request_example(self, word: WordCard, index: int) -> FetchResult:
        """Perform the blocking API call for one card."""
        payload = {
            "model": self.model,
            "messages": [
                {"role": "user", "content": build_prompt(word)},
            ],
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        logger.info("Fetching example for card %d (%s)", index, word.chinese)
        try:
            response = requests.post(self.api_url, json=payload, headers=headers, timeout=self.timeout)
        except requests.Timeout:
            logger.warning("Example request for card %d timed out", index)
            return FetchResult(index=index, error=f"request timed out after {self.timeout}s")
        except requests.RequestException as e:
            logger.warning("Example request for card %d failed: %s", index, e)
            return FetchResult(index=index, error=str(e))

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("Malformed response for card %d (HTTP %s)", index, response.status_code)
            return FetchResult(index=index, error=f"malformed response: {e}")

        if not isinstance(data, dict):
            return FetchResult(index=index, error="malformed response: expected a JSON object")

        error = data.get("error") or {}
        message = error.get("message", "") if isinstance(error, dict) else str(error)
        if message:
            logger.warning("API returned an error for card %d: %s", index, message)
            return FetchResult(index=index, error=message)

        choices = data.get("choices") or []
        if not choices:
            logger.warning("No choices returned for card %d", index)
            return FetchResult(index=index, error="No choices returned")

        try:
            example = choices[0]["message"]["content"]
        except (KeyError, TypeError) as e:
            return FetchResult(index=index, error=f"malformed response: missing {e}")

        if example is None:
            example = ""
        if not isinstance(example, str):
            logger.warning("Non-text content for card %d: %r", index, example)
            return FetchResult(index=index, error="malformed response: content is not text")

        logger.debug("Example for card %d: %r", index, example)
        return FetchResult(index=index, example=example)
