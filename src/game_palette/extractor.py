from __future__ import annotations

import logging
from typing import List, Literal

import numpy as np
from coloraide import Color
from sklearn.cluster import KMeans

from .conversions import Hex, rgb_to_hex

log = logging.getLogger(__name__)

Method = Literal["histogram", "kmeans"]
METHODS = ("histogram", "kmeans")

MIN_COLORS = 3
MAX_COLORS = 8
BUCKET = 32  # 8 levels per channel
MIN_DELTA_E = 10.0  # CIEDE2000; closer candidates count as duplicates
KMEANS_ITERS = 20
KMEANS_INIT = 3
KMEANS_SAMPLES = 10_000
SEED = 0

# game-dev friendly defaults, used to pad short results
FALLBACK_PALETTE: tuple[Hex, ...] = (
    "#ff6b6b",
    "#4ecdc4",
    "#45b7d1",
    "#96ceb4",
    "#ffeaa7",
    "#dda0dd",
    "#98d8c8",
    "#f7dc6f",
    "#bb8fce",
    "#85c1e9",
)


def clamp_count(n: int) -> int:
    return max(MIN_COLORS, min(int(n), MAX_COLORS))


def _pixels(image) -> np.ndarray:
    """Array-like image (H×W×C or N×C, 8-bit) -> N×3 float64 RGB."""
    arr = np.asarray(image)
    if arr.size == 0:
        return np.empty((0, 3), np.float64)
    if arr.ndim < 2 or arr.shape[-1] < 3:
        raise ValueError("image must have at least 3 channels in its last axis")
    px = arr.reshape(-1, arr.shape[-1])[:, :3].astype(np.float64)
    return np.clip(px, 0.0, 255.0)


def _histogram(px: np.ndarray) -> np.ndarray:
    """Bucket means ordered by bucket population (largest first)."""
    levels = 256 // BUCKET
    q = (px // BUCKET).astype(np.int64)
    codes = (q[:, 0] * levels + q[:, 1]) * levels + q[:, 2]
    _, inverse, counts = np.unique(codes, return_inverse=True, return_counts=True)
    inverse = inverse.ravel()
    sums = np.zeros((counts.size, 3), np.float64)
    np.add.at(sums, inverse, px)
    means = sums / counts[:, None]
    return means[np.argsort(-counts, kind="stable")]


def _kmeans(px: np.ndarray, k: int) -> np.ndarray:
    """KMeans centres ordered by cluster size (largest first)."""
    if len(px) > KMEANS_SAMPLES:
        rng = np.random.default_rng(SEED)
        px = px[rng.choice(len(px), size=KMEANS_SAMPLES, replace=False)]
    # no more clusters than distinct colours
    k = min(k, len(np.unique(px, axis=0)))
    kmeans = KMeans(n_clusters=k, n_init=KMEANS_INIT, max_iter=KMEANS_ITERS, random_state=SEED)
    kmeans.fit(px)
    counts = np.bincount(kmeans.labels_, minlength=k)
    return kmeans.cluster_centers_[np.argsort(-counts, kind="stable")]


def _distinct(candidates: np.ndarray, count: int) -> List[Hex]:
    out: List[Hex] = []
    for rgb in candidates:
        if len(out) >= count:
            break
        hx = rgb_to_hex(*rgb)
        c = Color(hx)
        if all(c.delta_e(o, method="2000") > MIN_DELTA_E for o in out):
            out.append(hx)
    for fb in FALLBACK_PALETTE:
        if len(out) >= count:
            break
        if fb not in out:
            out.append(fb)
    return out


def extract_palette(image, count: int = 5, method: Method = "histogram") -> List[Hex]:
    """
    Dominant colours of an 8-bit RGB image, most prominent first.

    `count` is clamped to [MIN_COLORS, MAX_COLORS]. Near-duplicate colours are
    skipped and short results are padded from FALLBACK_PALETTE; an empty
    image yields the fallback palette.
    """
    if method not in METHODS:
        raise ValueError(f"unknown extraction method '{method}'")
    n = clamp_count(count)
    px = _pixels(image)
    if len(px) == 0:
        log.warning("no pixels to sample, using fallback palette")
        return list(FALLBACK_PALETTE[:n])

    # oversample so duplicate rejection still leaves n candidates
    candidates = _histogram(px) if method == "histogram" else _kmeans(px, n * 2)
    return _distinct(candidates, n)


__all__ = ["FALLBACK_PALETTE", "METHODS", "clamp_count", "extract_palette"]
