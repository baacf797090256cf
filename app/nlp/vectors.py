# app/nlp/vectors.py
import math
import numpy as np

from app.core.errors import VectorFormatError

def format_vector(vec) -> str:
    """Serialize to the bracketed literal a vector column accepts, 8 decimals per value."""
    values = []
    for v in np.asarray(vec, dtype=np.float64).ravel():
        num = float(v)
        if math.isnan(num):
            num = 0.0
        values.append(repr(round(num, 8)))
    return "[" + ",".join(values) + "]"

def parse_vector(text: str | None, dim: int | None = None) -> np.ndarray:
    if text is None:
        raise VectorFormatError("vector is missing")
    body = text.strip()
    if not (body.startswith("[") and body.endswith("]")):
        raise VectorFormatError(f"not a vector literal: {body[:32]!r}")
    body = body[1:-1].strip()
    if not body:
        vec = np.zeros(0, dtype=np.float64)
    else:
        try:
            vec = np.array([float(x) for x in body.split(",")], dtype=np.float64)
        except ValueError as exc:
            raise VectorFormatError(str(exc)) from exc
    if dim is not None and vec.shape[0] != dim:
        raise VectorFormatError(f"expected {dim} dimensions, got {vec.shape[0]}")
    return vec

def _cos(a: np.ndarray, b: np.ndarray) -> float:
    if a.shape != b.shape:
        raise VectorFormatError(f"dimension mismatch: {a.shape[0]} vs {b.shape[0]}")
    na, nb = float(np.linalg.norm(a)), float(np.linalg.norm(b))
    if na == 0 or nb == 0: return 0.0
    return float(np.dot(a, b) / (na * nb))

def similarity(a: np.ndarray, b: np.ndarray) -> float:
    """Cosine similarity clamped into [0, 1]; opposed vectors count as unrelated."""
    return min(1.0, max(0.0, _cos(a, b)))
