"""Static skill taxonomy: career tracks -> skill requirements, skills -> resources.

Loaded once at import and treated as read-only for the life of the process.
Resource coverage is intentionally partial; ``resources_for`` returns an
empty tuple for skills without curated material.
"""

from typing import NamedTuple

from models.schemas.learning_resource import LearningResource
from services.errors import UnknownCategory


class Requirements(NamedTuple):
    required: tuple[str, ...]
    preferred: tuple[str, ...]


# ---------------------------------------------------------------------------
# Career tracks (category -> required / preferred skills)
# ---------------------------------------------------------------------------
CATEGORY_REQUIREMENTS: dict[str, Requirements] = {
    "Data Analytics Intern": Requirements(
        required=("Python", "SQL", "Excel", "Statistics", "Power BI"),
        preferred=("Machine Learning", "R", "Tableau", "Data Visualization"),
    ),
    "Software Development Intern": Requirements(
        required=("JavaScript", "HTML", "CSS", "Git", "Problem Solving"),
        preferred=("React", "Node.js", "TypeScript", "Database Design"),
    ),
    "Digital Marketing Intern": Requirements(
        required=("Digital Marketing", "Content Writing", "Social Media", "Analytics"),
        preferred=("SEO", "Google Ads", "Graphic Design", "Video Editing"),
    ),
    "Financial Analyst Intern": Requirements(
        required=("Finance", "Excel", "Financial Modeling", "Accounting"),
        preferred=("Python", "VBA", "Bloomberg Terminal", "Investment Analysis"),
    ),
    "UI/UX Design Intern": Requirements(
        required=("Figma", "User Research", "Wireframing", "Prototyping"),
        preferred=("Adobe Creative Suite", "HTML/CSS", "User Testing", "Design Systems"),
    ),
}


def _yt(query: str) -> str:
    return "https://www.youtube.com/results?search_query=" + query.replace(" ", "+")


# ---------------------------------------------------------------------------
# Learning resources (skill -> ordered resources, best first)
# ---------------------------------------------------------------------------
_RESOURCE_ROWS: list[tuple[str, str, str, str, bool, str]] = [
    # skill, name, kind, duration, free, url
    ("Python", "Python for Everybody (Coursera)", "course", "8 weeks", True,
     "https://www.coursera.org/specializations/python"),
    ("Python", "Python Programming Tutorial", "video", "12 hours", True, _yt("python tutorial")),
    ("Python", "The Python Tutorial", "documentation", "2 weeks", True,
     "https://docs.python.org/3/tutorial/"),
    ("SQL", "SQL Basics (SWAYAM)", "course", "6 weeks", True, "https://swayam.gov.in/"),
    ("SQL", "SQL Tutorial for Beginners", "video", "4 hours", True, _yt("sql tutorial for beginners")),
    ("Excel", "Excel Skills for Business", "course", "6 weeks", True,
     "https://www.coursera.org/specializations/excel"),
    ("Excel", "Advanced Excel Tutorial", "video", "8 hours", True, _yt("advanced excel tutorial")),
    ("Statistics", "Introduction to Statistics", "course", "8 weeks", True,
     "https://www.coursera.org/learn/stanford-statistics"),
    ("Power BI", "Power BI Learning Path", "documentation", "3 weeks", True,
     "https://learn.microsoft.com/en-us/training/powerplatform/power-bi"),
    ("Power BI", "Power BI Full Course", "video", "6 hours", True, _yt("power bi full course")),
    ("Tableau", "Tableau Free Training Videos", "video", "5 hours", True,
     "https://www.tableau.com/learn/training"),
    ("Machine Learning", "ML for Everyone (SWAYAM)", "course", "12 weeks", True, "https://swayam.gov.in/"),
    ("Machine Learning", "Machine Learning Basics", "video", "20 hours", True, _yt("machine learning basics")),
    ("JavaScript", "JavaScript Fundamentals (freeCodeCamp)", "course", "10 weeks", True,
     "https://www.freecodecamp.org/learn/"),
    ("JavaScript", "JS Complete Course", "video", "22 hours", True, _yt("javascript full course")),
    ("HTML", "MDN: Learn HTML", "documentation", "2 weeks", True,
     "https://developer.mozilla.org/en-US/docs/Learn/HTML"),
    ("CSS", "MDN: Learn CSS", "documentation", "3 weeks", True,
     "https://developer.mozilla.org/en-US/docs/Learn/CSS"),
    ("Git", "Pro Git Book", "documentation", "1 week", True, "https://git-scm.com/book/en/v2"),
    ("Git", "Git and GitHub for Beginners", "video", "1 hour", True, _yt("git and github for beginners")),
    ("React", "React Official Tutorial", "documentation", "2 weeks", True, "https://react.dev/learn"),
    ("React", "React Full Course", "video", "12 hours", True, _yt("react full course")),
    ("Node.js", "Node.js Learn", "documentation", "2 weeks", True, "https://nodejs.org/en/learn"),
    ("TypeScript", "TypeScript Handbook", "documentation", "2 weeks", True,
     "https://www.typescriptlang.org/docs/handbook/intro.html"),
    ("Digital Marketing", "Google Digital Marketing Course", "course", "8 weeks", True,
     "https://learndigital.withgoogle.com/"),
    ("Digital Marketing", "Digital Marketing Masterclass", "video", "15 hours", True,
     _yt("digital marketing masterclass")),
    ("SEO", "Google Search Central: SEO Starter Guide", "documentation", "1 week", True,
     "https://developers.google.com/search/docs/fundamentals/seo-starter-guide"),
    ("Content Writing", "Content Writing Crash Course", "video", "3 hours", True,
     _yt("content writing course")),
    ("Financial Modeling", "Financial Modeling Fundamentals", "video", "6 hours", True,
     _yt("financial modeling fundamentals")),
    ("Accounting", "Financial Accounting Fundamentals", "course", "5 weeks", True,
     "https://www.coursera.org/learn/uva-darden-financial-accounting"),
    ("Figma", "Figma Academy", "other", "4 weeks", True, "https://help.figma.com/"),
    ("Figma", "Figma Complete Tutorial", "video", "6 hours", True, _yt("figma tutorial")),
    ("User Research", "User Research Methods", "course", "4 weeks", True,
     "https://www.coursera.org/learn/ux-design-fundamentals"),
    ("Wireframing", "Wireframing for Beginners", "video", "2 hours", True, _yt("wireframing for beginners")),
    ("Prototyping", "Prototyping in Figma", "documentation", "1 week", True, "https://help.figma.com/"),
]

SKILL_RESOURCES: dict[str, tuple[LearningResource, ...]] = {}
for _skill, _name, _kind, _duration, _free, _url in _RESOURCE_ROWS:
    SKILL_RESOURCES[_skill] = SKILL_RESOURCES.get(_skill, ()) + (
        LearningResource(skill=_skill, name=_name, kind=_kind, duration=_duration, free=_free, url=_url),
    )

# Case-insensitive indexes
_CATEGORY_INDEX: dict[str, str] = {name.lower(): name for name in CATEGORY_REQUIREMENTS}
_RESOURCE_INDEX: dict[str, tuple[LearningResource, ...]] = {
    skill.lower(): resources for skill, resources in SKILL_RESOURCES.items()
}


def categories() -> list[str]:
    """Known career tracks in declaration order."""
    return list(CATEGORY_REQUIREMENTS)


def canonical_category(category: str) -> str:
    """Return the taxonomy spelling of ``category``. Raises UnknownCategory."""
    name = _CATEGORY_INDEX.get(category.strip().lower())
    if name is None:
        raise UnknownCategory(category)
    return name


def requirements_for(category: str) -> Requirements:
    """Required/preferred skills for a track. Raises UnknownCategory."""
    return CATEGORY_REQUIREMENTS[canonical_category(category)]


def resources_for(skill: str) -> tuple[LearningResource, ...]:
    """Curated resources for a skill in declared order; empty if none."""
    return _RESOURCE_INDEX.get(skill.strip().lower(), ())


def has_resources(skill: str) -> bool:
    return bool(resources_for(skill))


def categories_for_interests(interests: list[str]) -> list[str]:
    """Tracks whose name contains any of the interests, in taxonomy order."""
    needles = [i.strip().lower() for i in interests if i.strip()]
    return [
        name for name in CATEGORY_REQUIREMENTS
        if any(needle in name.lower() for needle in needles)
    ]
