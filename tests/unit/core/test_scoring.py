"""
Tests for placeholder match scoring.

Tests:
- Exact scores for known identifiers
- Score ranges
- Determinism
- Stable descending ranking
"""

import pytest

from core.scoring import (
    JOB_FEED_FLOOR,
    TALENT_MATCH_FLOOR,
    identifier_hash,
    job_feed_score,
    rank_by_score,
    score,
    talent_match_score,
)


class TestIdentifierHash:
    """Test the code point sum."""

    def test_sum_of_code_points(self):
        assert identifier_hash("abc") == 97 + 98 + 99

    def test_empty_identifier(self):
        assert identifier_hash("") == 0

    def test_uuid_identifier(self):
        assert identifier_hash("550e8400-e29b-41d4-a716-446655440001") == 2068


class TestScores:
    """Test talent match and job feed scores."""

    def test_talent_match_known_value(self):
        # 294 % 61 == 50
        assert talent_match_score("abc") == 90

    def test_job_feed_known_value(self):
        # 294 % 41 == 7
        assert job_feed_score("abc") == 67

    def test_uuid_scores(self):
        identifier = "550e8400-e29b-41d4-a716-446655440001"
        assert talent_match_score(identifier) == 95
        assert job_feed_score(identifier) == 78

    def test_empty_identifier_gets_floor(self):
        assert talent_match_score("") == TALENT_MATCH_FLOOR
        assert job_feed_score("") == JOB_FEED_FLOOR

    @pytest.mark.parametrize("identifier", [
        "a",
        "zzzzzzzz",
        "11111111-1111-4111-8111-111111111111",
        "ffffffff-ffff-4fff-bfff-ffffffffffff",
        "x" * 500,
    ])
    def test_scores_within_range(self, identifier):
        assert 40 <= talent_match_score(identifier) <= 100
        assert 60 <= job_feed_score(identifier) <= 100

    def test_upper_bound_reached(self):
        # 60 % 61 == 60 gives the top talent score; "<" is code point 60
        assert talent_match_score("<") == 100
        # 40 % 41 == 40 gives the top feed score; "(" is code point 40
        assert job_feed_score("(") == 100

    def test_deterministic(self):
        identifier = "33333333-3333-4333-8333-333333333333"
        assert talent_match_score(identifier) == talent_match_score(identifier)
        assert job_feed_score(identifier) == job_feed_score(identifier)

    def test_generic_score(self):
        assert score("abc", floor=0, width=10) == 294 % 10


class TestRankByScore:
    """Test descending stable sort."""

    def test_highest_first(self):
        items = [{"id": "a", "score": 50}, {"id": "b", "score": 90}, {"id": "c", "score": 70}]
        ranked = rank_by_score(items, key=lambda item: item["score"])
        assert [item["id"] for item in ranked] == ["b", "c", "a"]

    def test_ties_keep_input_order(self):
        items = [
            {"id": "first", "score": 80},
            {"id": "second", "score": 80},
            {"id": "third", "score": 95},
            {"id": "fourth", "score": 80},
        ]
        ranked = rank_by_score(items, key=lambda item: item["score"])
        assert [item["id"] for item in ranked] == ["third", "first", "second", "fourth"]

    def test_empty(self):
        assert rank_by_score([], key=lambda item: item) == []
