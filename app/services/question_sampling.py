import random
from typing import Any, Dict, List, Optional, Sequence

from app.core.config import settings


def sample_questions(
    pool: Sequence[Dict[str, Any]],
    count: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[Dict[str, Any]]:
    """
    Draw a uniform random subset of the pool without repetition.

    The result is in random order and has min(count, len(pool)) items; a pool
    smaller than the requested count is returned whole, shuffled.
    """
    if count is None:
        count = settings.QUESTIONS_PER_CANDIDATE
    if count < 0:
        raise ValueError("count must be non-negative")

    rng = rng or random.SystemRandom()
    picked = rng.sample(list(pool), min(count, len(pool)))
    # Copies, so the candidate snapshot never aliases the pool
    return [dict(question) for question in picked]
