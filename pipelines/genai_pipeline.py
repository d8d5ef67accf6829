from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging

import requests

from utils.config import Settings
from utils.prompts import (
    SYSTEM_PROMPT,
    NO_CREDENTIAL_SUMMARY,
    UNAVAILABLE_SUMMARY,
    EMPTY_SUMMARY,
)
from utils.text_processing import render_markdown, truncate

logger = logging.getLogger(__name__)


class SummarySource(str, Enum):
    LIVE = "live"
    EMPTY = "empty"
    NO_CREDENTIAL = "no_credential"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class SummaryResult:
    markdown: str
    source: SummarySource

    @property
    def is_fallback(self) -> bool:
        return self.source in (SummarySource.NO_CREDENTIAL, SummarySource.UNAVAILABLE)

    @property
    def html(self) -> str:
        return render_markdown(self.markdown)


class Summarizer:
    """
    Plain-English T&C summarizer backed by a chat-completion API.

    Every call resolves to a SummaryResult: the model's Markdown when the
    call succeeds, otherwise one of the canned documents in utils.prompts.
    """

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        # module-level requests keeps no cookie jar between calls
        self.http = session or requests

    def build_messages(self, text: str) -> list[dict]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": truncate(text, self.settings.max_input_chars)},
        ]

    def summarize(self, text: str) -> SummaryResult:
        if not self.settings.has_credential:
            logger.info("No API key configured, serving fallback summary")
            return SummaryResult(NO_CREDENTIAL_SUMMARY, SummarySource.NO_CREDENTIAL)

        body = {"model": self.settings.model, "messages": self.build_messages(text)}
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.settings.api_key}",
        }
        logger.info("Summarizing %d chars with %s", len(text or ""), self.settings.model)
        try:
            r = self.http.post(
                self.settings.api_url,
                json=body,
                headers=headers,
                timeout=self.settings.request_timeout,
            )
        except requests.RequestException as e:
            logger.warning("Summarization request failed: %s", e)
            return SummaryResult(UNAVAILABLE_SUMMARY, SummarySource.UNAVAILABLE)

        if not r.ok:
            logger.warning("Summarization API returned HTTP %s", r.status_code)
            return SummaryResult(UNAVAILABLE_SUMMARY, SummarySource.UNAVAILABLE)

        try:
            payload = r.json()
        except ValueError:
            logger.warning("Summarization API returned a non-JSON body")
            return SummaryResult(UNAVAILABLE_SUMMARY, SummarySource.UNAVAILABLE)

        content = _first_message_content(payload)
        if not content:
            return SummaryResult(EMPTY_SUMMARY, SummarySource.EMPTY)
        return SummaryResult(content, SummarySource.LIVE)

    def summarize_html(self, text: str) -> str:
        return self.summarize(text).html


def _first_message_content(payload) -> str:
    # choices[0].message.content, tolerating any missing level
    if not isinstance(payload, dict):
        return ""
    choices = payload.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return ""
    message = choices[0].get("message") or {}
    content = message.get("content") if isinstance(message, dict) else None
    return content.strip() if isinstance(content, str) else ""
