"""Keyword-overlap scoring of a profile against a single catalog record.

score = skill_overlap * SKILL_WEIGHT + location_match * LOCATION_WEIGHT
"""

import logging

from internmatch.core.schemas import ANY_LOCATION, Profile, Record, ScoreResult
from internmatch.pipeline.tokenizer import build_token_set

logger = logging.getLogger(__name__)

SKILL_WEIGHT = 10
LOCATION_WEIGHT = 2


def score_record(
    profile: Profile,
    record: Record,
    tokens: frozenset[str] | None = None,
) -> ScoreResult:
    """Score one record for a profile.

    Args:
        profile: The candidate profile.
        record: The catalog record to score.
        tokens: Optional token set already built from profile; built on demand
            when omitted.

    Returns:
        ScoreResult with the score, the number of shared skills and whether the
        location preference matched.
    """
    if tokens is None:
        tokens = build_token_set(profile)

    skill_overlap = sum(1 for skill in record.skills if skill.lower() in tokens)

    location_match = profile.location_preference in (ANY_LOCATION, record.location)

    score = skill_overlap * SKILL_WEIGHT + (1 if location_match else 0) * LOCATION_WEIGHT

    logger.debug(
        "Record %d: overlap=%d location_match=%s score=%d",
        record.id, skill_overlap, location_match, score,
    )
    return ScoreResult(score=score, skill_overlap=skill_overlap, location_match=location_match)
