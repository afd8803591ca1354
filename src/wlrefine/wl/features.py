from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from wlrefine.errors import InvalidHorizon
from .refine import WLStep


Dimension = Tuple[int, str]


@dataclass(frozen=True)
class KernelScore:
    """
    WL subtree kernel between A and B accumulated over steps 0..k.

    dot:        sum over dimensions of countA * countB
    cosine:     dot / (|A| |B|), 0.0 if either vector is zero
    dimensions: number of (k, label) coordinates
    """
    dot: int
    cosine: float
    dimensions: int


def _upto(steps: Sequence[WLStep], upto: Optional[int]) -> int:
    if upto is None:
        return len(steps) - 1
    if upto < 0 or upto >= len(steps):
        raise InvalidHorizon(f"upto must be in 0..{len(steps) - 1}, got {upto}.")
    return upto


def feature_vectors(
    steps: Sequence[WLStep],
    upto: Optional[int] = None,
) -> Tuple[List[Dimension], List[int], List[int]]:
    """
    Concatenated label histograms of A and B over steps 0..upto.

    Returns:
      (dims, vecA, vecB) where dims[i] = (k, label) and vecA[i], vecB[i]
      are the counts of that label at step k.
    """
    last = _upto(steps, upto)
    dims: List[Dimension] = []
    vecA: List[int] = []
    vecB: List[int] = []
    for step in steps[: last + 1]:
        for c in step.unique_labels:
            dims.append((step.k, c))
            vecA.append(step.label_counts_a.get(c, 0))
            vecB.append(step.label_counts_b.get(c, 0))
    return dims, vecA, vecB


def wl_kernel(steps: Sequence[WLStep], upto: Optional[int] = None) -> KernelScore:
    dims, vecA, vecB = feature_vectors(steps, upto)
    dot = sum(a * b for a, b in zip(vecA, vecB))
    normA = math.sqrt(sum(a * a for a in vecA))
    normB = math.sqrt(sum(b * b for b in vecB))
    cosine = dot / (normA * normB) if normA > 0 and normB > 0 else 0.0
    return KernelScore(dot=dot, cosine=cosine, dimensions=len(dims))
