import pytest

from models.schemas.semantic import JobText
from services.mock_semantic import mock_semantic_scores

JOBS = [
    JobText(id="j1", description="Senior React developer building TypeScript frontends"),
    JobText(id="j2", description="Backend Python engineer with Django and Postgres"),
    JobText(id="j3", description=""),
]


def test_empty_query_scores_zero():
    scores = mock_semantic_scores(JOBS, "")
    assert [s.id for s in scores] == ["j1", "j2", "j3"]
    assert all(s.semantic_score == 0 for s in scores)


def test_none_query_scores_zero():
    assert all(s.semantic_score == 0 for s in mock_semantic_scores(JOBS, None))


def test_query_of_short_words_scores_zero():
    scores = mock_semantic_scores(JOBS, "a to of")
    assert all(s.semantic_score == 0 for s in scores)


def test_empty_description_scores_zero():
    scores = mock_semantic_scores([JobText(id="j1", description="")], "react")
    assert scores[0].id == "j1"
    assert scores[0].semantic_score == 0


def test_overlap_fraction():
    scores = mock_semantic_scores(JOBS, "react typescript developer golang")
    by_id = {s.id: s.semantic_score for s in scores}
    assert by_id["j1"] == pytest.approx(0.75)
    assert by_id["j2"] == 0
    assert by_id["j3"] == 0


def test_case_insensitive_and_deduplicated():
    scores = mock_semantic_scores(JOBS[:1], "REACT react React")
    assert scores[0].semantic_score == pytest.approx(1.0)


def test_one_score_per_job_in_order():
    jobs = [JobText(id=str(i), description="python") for i in range(5)]
    scores = mock_semantic_scores(jobs, "python")
    assert [s.id for s in scores] == ["0", "1", "2", "3", "4"]
    assert all(s.semantic_score == 1.0 for s in scores)
