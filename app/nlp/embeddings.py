# app/nlp/embeddings.py
import logging
import re
import struct
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from app.core.config import settings
from app.nlp.keywords import JOB_PROMPT, PROFILE_PROMPT, KeywordExtractor

logger = logging.getLogger(__name__)

_CONTROL_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")

def sanitize(text):
    """Strip non-printable control characters (keeps tab, newline, carriage return)."""
    if not text:
        return text
    return _CONTROL_RE.sub("", text)

def string_hash(text: str) -> int:
    """
    Polynomial hash ``h = h*31 + unit`` over UTF-16 code units, wrapped to a
    signed 32-bit integer after every step, returned as its absolute value.
    """
    h = 0
    data = text.encode("utf-16-le", "surrogatepass")
    for (unit,) in struct.iter_unpack("<H", data):
        h = (h * 31 + unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)

def keyword_text(value) -> str:
    """Text of a JSON-decoded keyword as the model wrote it (null, true, 3)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)

def keyword_vector(keywords: list, dim: int = 768) -> np.ndarray:
    """
    Project a ranked bag of keywords onto ``dim`` sine basis functions.

    Keyword ``i`` adds ``sin(hash * (j+1) * 0.001) / (i+1)`` to dimension ``j``,
    so earlier keywords weigh more. Keywords that sanitize to an empty string
    are skipped but still consume their rank. The result is L2-normalized, or
    all zeros when nothing usable was extracted.
    """
    out = np.zeros(dim, dtype=np.float64)
    steps = np.arange(1, dim + 1, dtype=np.int64)
    for i, keyword in enumerate(keywords):
        clean = sanitize(keyword_text(keyword))
        if not clean:
            continue
        h = string_hash(clean.lower())
        out += np.sin(h * steps * 0.001) * (1 / (i + 1))
    magnitude = float(np.linalg.norm(out))
    if magnitude > 0:
        out = out / magnitude
    return out


class Embedder(ABC):
    """Maps free text to a fixed-length vector suitable for cosine comparison."""

    dim: int

    @abstractmethod
    def embed(self, text: str) -> np.ndarray:
        raise NotImplementedError


class KeywordHashEmbedder(Embedder):
    """LLM keyword extraction followed by deterministic hashing."""

    def __init__(self, extractor=None, dim: int | None = None):
        self.extractor = extractor or KeywordExtractor()
        self.dim = dim or settings.EMBEDDING_DIM

    def embed(self, text: str) -> np.ndarray:
        keywords = self.extractor(text)
        logger.debug("extracted %d keywords", len(keywords))
        return keyword_vector(keywords, self.dim)


# ---------- Model cache ----------
_model = None

def get_model():
    global _model
    if _model is None:
        from sentence_transformers import SentenceTransformer
        _model = SentenceTransformer(settings.EMBEDDING_MODEL)
    return _model


class SentenceTransformerEmbedder(Embedder):
    def __init__(self, model=None, max_chars: int | None = None):
        self._model = model
        self.max_chars = max_chars or settings.EMBEDDING_MAX_CHARS
        self.dim = settings.EMBEDDING_DIM

    def embed(self, text: str) -> np.ndarray:
        model = self._model or get_model()
        X = model.encode([(text or "")[: self.max_chars]], normalize_embeddings=True)
        return np.asarray(X, dtype=np.float64)[0]


def get_embedder(purpose: str = "profile") -> Embedder:
    if settings.EMBEDDING_BACKEND == "sentence-transformers":
        return SentenceTransformerEmbedder()
    prompt = JOB_PROMPT if purpose == "job" else PROFILE_PROMPT
    return KeywordHashEmbedder(KeywordExtractor(prompt))

def get_profile_embedder() -> Embedder:
    return get_embedder("profile")

def get_job_embedder() -> Embedder:
    return get_embedder("job")


def embed_facets(embedder: Embedder, texts: dict[str, str]) -> dict[str, np.ndarray]:
    """
    Embed each facet text concurrently and wait for all of them.
    The first failure propagates, so callers never see a partial result.
    """
    with ThreadPoolExecutor(max_workers=max(1, len(texts))) as pool:
        futures = {facet: pool.submit(embedder.embed, text) for facet, text in texts.items()}
        return {facet: fut.result() for facet, fut in futures.items()}
