"""
Placeholder match scoring.

Scores are a pure function of an identifier's characters: the sum of their
code points, reduced modulo the range width and shifted by a floor. The
arithmetic is fixed so ranked lists are reproducible.
"""

from typing import Callable, Iterable, TypeVar

T = TypeVar("T")

TALENT_MATCH_FLOOR = 40
TALENT_MATCH_WIDTH = 61  # [40, 100]

JOB_FEED_FLOOR = 60
JOB_FEED_WIDTH = 41  # [60, 100]


def identifier_hash(identifier: str) -> int:
    """Sum of the code points of every character in the identifier."""
    return sum(ord(char) for char in identifier)


def score(identifier: str, floor: int, width: int) -> int:
    """Map an identifier to an integer in ``[floor, floor + width - 1]``."""
    return floor + identifier_hash(identifier) % width


def talent_match_score(talent_id: str) -> int:
    """Score shown to an employer for a candidate talent."""
    return score(talent_id, TALENT_MATCH_FLOOR, TALENT_MATCH_WIDTH)


def job_feed_score(job_id: str) -> int:
    """Score shown to a talent for a job in their feed."""
    return score(job_id, JOB_FEED_FLOOR, JOB_FEED_WIDTH)


def rank_by_score(items: Iterable[T], key: Callable[[T], int]) -> list[T]:
    """
    Sort items by score, highest first.

    Ties keep their input order; there is no secondary key.
    """
    return sorted(items, key=key, reverse=True)
