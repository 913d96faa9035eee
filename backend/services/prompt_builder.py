"""Prompt templates for Gemini API calls."""

from models.schemas.opportunity import Opportunity
from models.schemas.profile import Profile


def _join(values: list[str]) -> str:
    return ", ".join(values) if values else "(none)"


def build_match_prompt(profile: Profile, opportunity: Opportunity) -> str:
    """Score one candidate profile against one opportunity.

    The rubric keeps the model's scale aligned with the local fallback, which
    never leaves the 60-95 band, so mixed batches stay comparable.
    """
    experience_section = ""
    if profile.experience.strip():
        experience_section = f"""
EXPERIENCE / RESUME TEXT:
---
{profile.experience.strip()}
---
"""

    return f"""You are an internship matching assistant for students.

Score how well the candidate fits the opportunity using the rubric below.

SCORING RUBRIC (follow strictly):
- 0-40:  Different field; almost no required skill is present.
- 40-60: Some transferable skills, major gaps in required skills.
- 60-80: Most required skills present, interests partly aligned.
- 80-100: Required skills present, interests and location aligned.

CANDIDATE:
- Skills: {_join(profile.skills)}
- Interests: {_join(profile.interests)}
- Preferred location: {profile.preferred_location or "(any)"}
- Education: {profile.education_level or "(not stated)"} {profile.institute}
{experience_section}
OPPORTUNITY:
- Title: {opportunity.title}
- Organization: {opportunity.organization}
- Category: {opportunity.category}
- Location: {opportunity.location}
- Required skills: {_join(opportunity.required_skills)}
- Preferred skills: {_join(opportunity.preferred_skills)}
- Minimum qualification: {opportunity.min_qualification or "(not stated)"}
- Description: {opportunity.description}

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "match_score": <integer 0-100>,
  "rationale": "<one or two sentences explaining the score>"
}}"""
