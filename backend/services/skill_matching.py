"""Case-insensitive, bidirectional substring skill matching.

Deliberately permissive: "Data" matches "Data Analysis" and vice versa.
The fallback scorer, matched-skill listing and gap analysis all share this
rule so a skill counted as held in one place is held everywhere.
"""

from collections.abc import Iterable


def skills_match(a: str, b: str) -> bool:
    """True when either name contains the other, ignoring case and padding."""
    left = a.strip().lower()
    right = b.strip().lower()
    if not left or not right:
        return False
    return left in right or right in left


def holds_skill(candidate_skills: Iterable[str], skill: str) -> bool:
    """Whether any candidate skill matches ``skill``."""
    return any(skills_match(have, skill) for have in candidate_skills)


def matched_candidate_skills(candidate_skills: Iterable[str], targets: list[str]) -> list[str]:
    """Candidate skills that match at least one target skill, in candidate order."""
    return [s for s in candidate_skills if holds_skill(targets, s)]


def matched_target_skills(candidate_skills: list[str], targets: Iterable[str]) -> list[str]:
    """Target skills covered by the candidate, in target order."""
    return [t for t in targets if holds_skill(candidate_skills, t)]


def text_mentions(text: str, term: str) -> bool:
    """Case-insensitive containment of ``term`` in ``text``; blank terms never match."""
    needle = term.strip().lower()
    return bool(needle) and needle in text.lower()
