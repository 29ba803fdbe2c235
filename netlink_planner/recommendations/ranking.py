from __future__ import annotations

from typing import Iterable

from ..config import MAX_RESULT_LIMIT
from .scoring import ScoredCandidate

DEFAULT_RESULT_LIMIT = MAX_RESULT_LIMIT


def rank_candidates(
    candidates: Iterable[ScoredCandidate],
    limit: int = DEFAULT_RESULT_LIMIT,
) -> list[ScoredCandidate]:
    """Best match first; equal scores fall back to ascending medium id.

    ``limit`` is clamped to ``[0, MAX_RESULT_LIMIT]``.
    """
    ordered = sorted(candidates, key=lambda c: (-c.match_score, c.media.id))
    return ordered[:max(0, min(limit, MAX_RESULT_LIMIT))]
