"""
MyMemory translation client.

Each call sends a single GET request; failures never raise and fall back to
the original text so a run always produces a complete file.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from .config import DEFAULT_ENDPOINT, DEFAULT_SOURCE_LANG, DEFAULT_TIMEOUT, Settings

logger = logging.getLogger(__name__)

DRY_RUN_MARKER = "[TR]"


class TranslationClient:
    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        source_lang: str = DEFAULT_SOURCE_LANG,
        email: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.endpoint = endpoint
        self.source_lang = source_lang
        self.email = email
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings) -> "TranslationClient":
        return cls(
            endpoint=settings.endpoint,
            source_lang=settings.source_lang,
            email=settings.email,
            timeout=settings.timeout,
        )

    def translate(self, text: str, target_language: str) -> str:
        """Translate `text` into `target_language`; return `text` on any failure."""
        params = {
            "q": text,
            "langpair": f"{self.source_lang}|{target_language}",
            "de": self.email,
        }
        try:
            resp = self.session.get(self.endpoint, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
            return _extract_translation(data)
        except (requests.RequestException, ValueError) as exc:
            logger.warning(
                "Translation to %s failed for '%s': %s", target_language, text[:50], exc
            )
            return text

    def close(self) -> None:
        self.session.close()


def _extract_translation(data: object) -> str:
    """Pull responseData.translatedText out of a MyMemory payload."""
    if not isinstance(data, dict):
        raise ValueError("response payload is not a JSON object")

    # MyMemory reports quota and argument errors with HTTP 200 and an error status.
    status = data.get("responseStatus", 200)
    if str(status) != "200":
        details = data.get("responseDetails") or "no details"
        raise ValueError(f"service returned status {status}: {details}")

    response_data = data.get("responseData")
    if not isinstance(response_data, dict):
        raise ValueError("response payload has no responseData")
    translated = response_data.get("translatedText")
    if not isinstance(translated, str):
        raise ValueError("response payload has no translatedText")
    return translated


class DryRunClient:
    """Stand-in client that marks strings instead of calling the API."""

    def translate(self, text: str, target_language: str) -> str:
        return f"{DRY_RUN_MARKER}{text}"

    def close(self) -> None:
        pass
