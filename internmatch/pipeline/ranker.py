"""Ranking of a whole catalog and per-entry explanations.

Ranking is a stable descending sort on score: records with equal scores come
out in the same relative order as in the catalog.
"""

import logging
from collections.abc import Sequence

from internmatch.core.schemas import Explanation, Profile, RankedEntry, Record
from internmatch.pipeline.scorer import score_record
from internmatch.pipeline.tokenizer import build_token_set

logger = logging.getLogger(__name__)


def rank(profile: Profile, catalog: Sequence[Record]) -> list[RankedEntry]:
    """Score every record and return them best first, with 1-based ranks."""
    tokens = build_token_set(profile)
    scored = [(record, score_record(profile, record, tokens)) for record in catalog]
    # sorted() is stable; equal scores keep catalog order.
    scored = sorted(scored, key=lambda pair: pair[1].score, reverse=True)

    ranked = [
        RankedEntry(record=record, result=result, rank=position)
        for position, (record, result) in enumerate(scored, start=1)
    ]
    if ranked:
        logger.info(
            "Ranked %d records; top is #%d with score %d",
            len(ranked), ranked[0].record.id, ranked[0].score,
        )
    else:
        logger.info("Ranked an empty catalog")
    return ranked


def explain(entry: RankedEntry) -> Explanation:
    """Expose the scoring breakdown already stored on a ranked entry."""
    return Explanation(
        skill_overlap_count=entry.result.skill_overlap,
        location_match=entry.result.location_match,
    )


def find_entry(entries: Sequence[RankedEntry], record_id: int) -> RankedEntry | None:
    """Return the ranked entry for record_id, or None if it is not in the ranking."""
    for entry in entries:
        if entry.record.id == record_id:
            return entry
    return None
