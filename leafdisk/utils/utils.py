"""Common utility functions."""

import re
import numpy as np
import torch
from .config import EPS_NORMALIZE


def normalize(v, eps: float = EPS_NORMALIZE) -> np.ndarray:
    """L2-normalize last dimension, safe for zeros."""
    v = np.asarray(v, dtype=np.float64)
    norm = np.linalg.norm(v, axis=-1, keepdims=True)
    return v / np.maximum(norm, eps)


def as_numpy(a) -> np.ndarray:
    """Convert to float64 numpy array."""
    if isinstance(a, torch.Tensor):
        a = a.detach().cpu().numpy()
    return np.asarray(a, dtype=np.float64)


_VEC_SPLIT = re.compile(r"[\s,]+")


def parse_vec3(text) -> np.ndarray:
    """Parse a 3D coordinate such as ``"[1, 2, 3]"`` or ``[1, 2, 3]``."""
    if isinstance(text, str):
        body = text.strip()
        if body.startswith("[") and body.endswith("]"):
            body = body[1:-1]
        tokens = [t for t in _VEC_SPLIT.split(body.strip()) if t]
    else:
        tokens = list(text)
    if len(tokens) != 3:
        raise ValueError(
            f"expected a 3-dimensional coordinate, e.g., \"[1, 2, 3]\" (got {text!r})")
    try:
        return np.array([float(t) for t in tokens], dtype=np.float64)
    except (TypeError, ValueError):
        raise ValueError(
            f"expected a 3-dimensional coordinate, e.g., \"[1, 2, 3]\" (got {text!r})") from None
