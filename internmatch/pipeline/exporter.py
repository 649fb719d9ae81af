"""CSV export and text explanations for a ranked result set."""

import csv
import io
import logging
from collections.abc import Sequence
from pathlib import Path

from internmatch.core.schemas import RankedEntry
from internmatch.pipeline.ranker import explain

logger = logging.getLogger(__name__)

CSV_HEADER = ("id", "title", "org", "location", "duration", "stipend", "score")

NEXT_STEPS = (
    "Polish missing skills (if any) with quick online courses.",
    "Apply and attach a tailored cover note highlighting matched skills.",
)


def to_csv(entries: Sequence[RankedEntry]) -> str:
    """Serialize ranked entries to CSV, in the order given.

    The header row is bare; every data field is double-quoted with embedded
    quotes doubled. Each line ends with a newline.
    """
    buffer = io.StringIO()
    buffer.write(",".join(CSV_HEADER) + "\n")
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for entry in entries:
        r = entry.record
        writer.writerow([r.id, r.title, r.org, r.location, r.duration, r.stipend, entry.score])
    return buffer.getvalue()


def write_csv(entries: Sequence[RankedEntry], path: str | Path) -> Path:
    """Write the CSV export to path and return it."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_csv(entries), encoding="utf-8", newline="")
    logger.info("Wrote %d rows to %s", len(entries), path)
    return path


def format_explanation(entry: RankedEntry) -> list[str]:
    """Human-readable lines explaining why an entry was recommended."""
    e = explain(entry)
    lines = [
        f"Why #{entry.rank} {entry.record.title} ({entry.record.org}):",
        f"  Skill overlap: {e.skill_overlap_count} shared skills.",
        f"  Location match: {'Yes' if e.location_match else 'No'}.",
        "  Next steps:",
    ]
    lines.extend(f"    {i}. {step}" for i, step in enumerate(NEXT_STEPS, start=1))
    return lines
