"""Candidate profile: the skills and interests a candidate brings to matching."""

from pydantic import BaseModel, field_validator


def dedupe_names(values: object) -> list[str]:
    """Trim, drop blanks, and dedupe case-insensitively keeping first spelling."""
    if values is None:
        return []
    if isinstance(values, (str, bytes)) or not isinstance(values, (list, tuple, set, frozenset)):
        raise ValueError("expected a list of names, not a single value")

    seen: set[str] = set()
    names: list[str] = []
    for value in values:
        if not isinstance(value, str):
            raise ValueError(f"expected string entries, got {type(value).__name__}")
        name = value.strip()
        key = name.lower()
        if not name or key in seen:
            continue
        seen.add(key)
        names.append(name)
    return names


class Profile(BaseModel):
    """Identity-free candidate record.

    ``skills`` and ``interests`` behave as sets: order carries no meaning for
    scoring, but first-seen order is kept so output stays reproducible.
    """
    name: str = ""
    skills: list[str] = []
    interests: list[str] = []
    experience: str = ""  # free-text experience / resume text
    preferred_location: str = ""
    education_level: str = ""
    institute: str = ""

    @field_validator("skills", "interests", mode="before")
    @classmethod
    def _normalize_names(cls, value: object) -> list[str]:
        return dedupe_names(value)
