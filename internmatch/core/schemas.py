"""Core data models for the internship matching engine."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

ANY_LOCATION = "Any"


def _dedupe_skills(skills: list[str] | tuple[str, ...]) -> tuple[str, ...]:
    """Trim skills, drop blanks and keep the first spelling of each (case-insensitive)."""
    seen: set[str] = set()
    result: list[str] = []
    for skill in skills:
        value = skill.strip()
        key = value.lower()
        if not value or key in seen:
            continue
        seen.add(key)
        result.append(value)
    return tuple(result)


class Profile(BaseModel):
    """A candidate's matchable attributes.

    Frozen. Every edit builds a new Profile (see with_skill / without_skill).
    location_preference is compared literally by the scorer and is not
    checked against any option list here.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    skills: tuple[str, ...] = ()
    interests: str = ""
    location_preference: str = ANY_LOCATION
    free_text: str = ""

    @field_validator("name", "interests", "free_text", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("location_preference", mode="before")
    @classmethod
    def none_as_any(cls, v: Any) -> Any:
        return ANY_LOCATION if v is None else v

    @field_validator("skills", mode="before")
    @classmethod
    def normalize_skills(cls, v: Any) -> Any:
        if v is None:
            return ()
        if isinstance(v, str):
            v = [v]
        if isinstance(v, (list, tuple, set, frozenset)):
            return _dedupe_skills([str(s) for s in v])
        return v

    def edit(self, **changes: Any) -> "Profile":
        """Return a new profile with changes applied, re-running field validation."""
        return type(self).model_validate({**self.model_dump(), **changes})

    def with_skill(self, skill: str) -> "Profile":
        """Return a new profile with skill added (no-op for blanks and duplicates)."""
        return self.model_copy(update={"skills": _dedupe_skills((*self.skills, skill))})

    def without_skill(self, skill: str) -> "Profile":
        """Return a new profile with skill removed (case-insensitive)."""
        key = skill.strip().lower()
        remaining = tuple(s for s in self.skills if s.lower() != key)
        return self.model_copy(update={"skills": remaining})

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Profile":
        """Load a profile from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Profile file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)

    def to_yaml(self, path: str | Path) -> None:
        """Write the profile to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        data = self.model_dump()
        data["skills"] = list(self.skills)
        path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False))


class Record(BaseModel):
    """An opportunity listed in the catalog. Immutable once loaded."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    org: str = ""
    skills: tuple[str, ...] = ()
    location: str = ""
    duration: str = ""
    stipend: str = ""


class ScoreResult(BaseModel):
    """Score and explanation fields for one (profile, record) pair."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0)
    skill_overlap: int = Field(ge=0)
    location_match: bool


class RankedEntry(BaseModel):
    """A record joined with its score, positioned by rank (1-based)."""

    model_config = ConfigDict(frozen=True)

    record: Record
    result: ScoreResult
    rank: int = Field(ge=1)

    @property
    def score(self) -> int:
        return self.result.score


class Explanation(BaseModel):
    """Scoring breakdown exposed for a single ranked entry."""

    model_config = ConfigDict(frozen=True)

    skill_overlap_count: int = Field(ge=0)
    location_match: bool
