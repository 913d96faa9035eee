"""Shared test configuration, pytest markers and fixtures."""

import pytest

from models.schemas.opportunity import Opportunity
from models.schemas.profile import Profile


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: calls the live Gemini API (needs GEMINI_API_KEY)"
    )


@pytest.fixture
def analyst_profile() -> Profile:
    return Profile(
        name="Asha",
        skills=["Python", "Data Analysis"],
        interests=["Finance"],
    )


@pytest.fixture
def analyst_opportunity() -> Opportunity:
    return Opportunity(
        id="fa-1",
        title="Financial Analyst Intern",
        organization="FinanceHub",
        category="business",
        location="Pune",
        stipend=18000,
        required_skills=["Python", "SQL", "Excel"],
        preferred_skills=["Machine Learning"],
        description="Assist the finance team with budgeting and reporting",
    )
