"""Catalog sources: the built-in sample internships and a YAML/JSON file loader."""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import TypeAdapter

from internmatch.core.schemas import Record

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(list[Record])

SAMPLE_CATALOG: tuple[Record, ...] = (
    Record(
        id=1,
        title="Frontend Developer Intern",
        org="TechBridge Labs",
        skills=("javascript", "react", "css", "html"),
        location="Remote",
        duration="8 weeks",
        stipend="10,000 INR",
    ),
    Record(
        id=2,
        title="Data Science Intern",
        org="InsightAI Pvt Ltd",
        skills=("python", "machine learning", "pandas", "nlp"),
        location="Bengaluru",
        duration="12 weeks",
        stipend="15,000 INR",
    ),
    Record(
        id=3,
        title="Product Research Intern",
        org="GovTech Initiatives",
        skills=("research", "user research", "policy", "writing"),
        location="New Delhi",
        duration="6 weeks",
        stipend="Unpaid",
    ),
    Record(
        id=4,
        title="Backend Developer Intern",
        org="ScaleStack",
        skills=("nodejs", "express", "sql", "docker"),
        location="Mumbai",
        duration="8 weeks",
        stipend="12,000 INR",
    ),
    Record(
        id=5,
        title="AI Ethics Intern",
        org="Policy Labs",
        skills=("ethics", "nlp", "policy", "research"),
        location="Remote",
        duration="10 weeks",
        stipend="12,000 INR",
    ),
)


def validate_catalog(records: Iterable[Record]) -> tuple[Record, ...]:
    """Freeze records into a catalog tuple, rejecting repeated ids."""
    catalog = tuple(records)
    seen: set[int] = set()
    for record in catalog:
        if record.id in seen:
            msg = f"duplicate record id in catalog: {record.id}"
            raise ValueError(msg)
        seen.add(record.id)
    return catalog


def load_catalog(path: str | Path) -> tuple[Record, ...]:
    """Load a catalog from a YAML or JSON file.

    The top level is either a list of record mappings or a mapping with an
    ``internships`` list. File order is kept as catalog order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the content is not a record list or ids repeat.
    """
    path = Path(path)
    if not path.exists():
        msg = f"Catalog file not found: {path}"
        raise FileNotFoundError(msg)

    raw: Any = yaml.safe_load(path.read_text())
    if raw is None:
        raw = []
    elif isinstance(raw, dict):
        if "internships" not in raw:
            msg = f"Catalog mapping has no 'internships' list: {path}"
            raise ValueError(msg)
        raw = raw["internships"] or []
    if not isinstance(raw, list):
        msg = f"Catalog must be a list of records: {path}"
        raise ValueError(msg)

    catalog = validate_catalog(_RECORDS.validate_python(raw))
    logger.info("Loaded %d records from %s", len(catalog), path)
    return catalog


def location_options(records: Iterable[Record]) -> list[str]:
    """Distinct record locations, in catalog order."""
    seen: list[str] = []
    for record in records:
        if record.location and record.location not in seen:
            seen.append(record.location)
    return seen
