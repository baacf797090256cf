"""
Semantic keyword extraction through an OpenAI-compatible chat completions
gateway.

The model is asked for a strict JSON array of short keywords. Replies are
often wrapped in markdown code fences or come back as a plain list, so
:func:`parse_keywords` strips the fences and falls back to splitting on
commas and newlines instead of failing.
"""
import json
import logging
import re

import requests

from app.core.config import settings
from app.core.errors import UpstreamServiceError

logger = logging.getLogger(__name__)

PROFILE_PROMPT = (
    "You are an embedding generator. Extract exactly {count} semantic keywords/concepts "
    "from the input text that best represent its meaning for job matching. Output ONLY a "
    "JSON array of {count} strings, nothing else. Focus on: skills, technologies, industries, "
    "job roles, experience levels, and career aspirations."
)

JOB_PROMPT = (
    "You are an embedding generator for job postings. Extract exactly {count} semantic "
    "keywords/concepts that best represent this job for matching with candidates. Output "
    "ONLY a JSON array of {count} strings. Focus on: required skills, technologies, job "
    "responsibilities, experience requirements, and industry context."
)

_FENCE_RE = re.compile(r"```json\n?|\n?```")
_SPLIT_RE = re.compile(r"[,\n]")


def parse_keywords(content: str) -> list:
    """Parse a model reply into a list of keywords. Never raises."""
    clean = _FENCE_RE.sub("", content or "").strip()
    try:
        parsed = json.loads(clean)
    except ValueError:
        parsed = None
    if isinstance(parsed, list):
        return parsed
    return [k.strip() for k in _SPLIT_RE.split(content or "") if k.strip()]


def chat_completion(messages: list[dict], **extra) -> dict:
    """POST to ``{LLM_API_URL}/chat/completions`` and return the decoded body."""
    if not settings.LLM_API_KEY:
        raise UpstreamServiceError("The AI service is not configured.")
    url = settings.LLM_API_URL.rstrip("/") + "/chat/completions"
    body = {"model": settings.LLM_MODEL, "messages": messages, **extra}
    try:
        r = requests.post(
            url,
            json=body,
            headers={"Authorization": f"Bearer {settings.LLM_API_KEY}"},
            timeout=settings.LLM_TIMEOUT,
        )
    except requests.RequestException as exc:
        logger.error("AI request failed: %s", exc)
        raise UpstreamServiceError() from exc
    if not r.ok:
        logger.error("AI request failed: %s %s", r.status_code, r.text[:500])
        raise UpstreamServiceError()
    try:
        data = r.json()
    except ValueError as exc:
        logger.error("AI gateway sent a non-JSON body: %s", r.text[:500])
        raise UpstreamServiceError() from exc
    if not isinstance(data, dict):
        logger.error("AI gateway sent an unexpected body: %s", type(data).__name__)
        raise UpstreamServiceError()
    return data


class KeywordExtractor:
    def __init__(self, prompt: str = PROFILE_PROMPT, count: int | None = None, max_chars: int | None = None):
        self.count = count or settings.EMBEDDING_KEYWORDS
        self.prompt = prompt.format(count=self.count)
        self.max_chars = max_chars or settings.EMBEDDING_MAX_CHARS

    def __call__(self, text: str) -> list:
        data = chat_completion(
            [
                {"role": "system", "content": self.prompt},
                {"role": "user", "content": (text or "")[: self.max_chars]},
            ],
            temperature=0.1,
        )
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            content = None
        if not isinstance(content, str) or not content:
            content = "[]"
        return parse_keywords(content)
