"""Re-rank keyword-scored job matches with a semantic signal.

Order of preference:
1. Stored CV embedding vs. embedded job descriptions
2. Keyword overlap between the search query and job descriptions
3. Leave scores unchanged
"""

import logging
from collections.abc import Sequence

from config import settings
from models.requests import JobMatchInput
from models.responses import RankedMatch, SemanticRankResponse
from models.schemas.semantic import JobText, SemanticScore
from services.mock_semantic import mock_semantic_scores
from services.semantic_search import blend_scores, compute_semantic_scores, get_cv_embedding

logger = logging.getLogger(__name__)


async def rank_matches(
    matches: Sequence[JobMatchInput],
    user_id: str,
    cv_id: str | None = None,
    query: str | None = None,
) -> SemanticRankResponse:
    if not matches:
        return SemanticRankResponse(method="unchanged", updated=0)

    jobs = [JobText(id=m.id, description=m.description) for m in matches]
    scores: list[SemanticScore] | None = None
    method = "unchanged"

    if cv_id:
        cv_embedding = await get_cv_embedding(user_id, cv_id)
        if cv_embedding:
            scores = await compute_semantic_scores(cv_embedding, jobs)
            method = "vector"

    if scores is None and query:
        logger.info("No CV embedding for user %s, falling back to mock scoring", user_id)
        scores = mock_semantic_scores(jobs, query)
        method = "mock"

    if scores is None:
        return SemanticRankResponse(method="unchanged", updated=0)

    score_map = {s.id: s.semantic_score for s in scores}
    ranked = []
    for m in matches:
        semantic = score_map.get(m.id, 0.0)
        ranked.append(RankedMatch(
            id=m.id,
            keyword_score=m.match_score,
            semantic_score=semantic,
            blended_score=blend_scores(m.match_score, semantic * 100, settings.semantic_weight),
        ))

    return SemanticRankResponse(method=method, updated=len(scores), matches=ranked)
