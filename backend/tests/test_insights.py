import pytest

from models.schemas.match_result import MatchResult
from models.schemas.opportunity import Opportunity
from services.catalog import SAMPLE_CATALOG, InMemoryCatalogProvider
from services.insights import catalog_insights, summarize_matches


class TestCatalogInsights:
    def test_sample_catalog(self):
        insights = catalog_insights(list(SAMPLE_CATALOG))
        assert insights.total_opportunities == 5
        assert insights.category_distribution == {"tech": 2, "business": 2, "design": 1}
        assert [d.skill for d in insights.top_skills[:3]] == ["Data Analysis", "Excel", "Communication"]
        assert insights.top_skills[0].count == 2
        assert len(insights.top_skills) == 10

    def test_empty_catalog(self):
        insights = catalog_insights([])
        assert insights.total_opportunities == 0
        assert insights.top_skills == []


class TestSummarizeMatches:
    def test_summary(self):
        results = [
            MatchResult(opportunity=Opportunity(stipend=20000), score=90),
            MatchResult(opportunity=Opportunity(stipend=10000), score=80),
        ]
        summary = summarize_matches(results)
        assert summary.total == 2
        assert summary.average_score == 85
        assert summary.high_match_count == 1
        assert summary.average_stipend == 15000

    def test_empty(self):
        assert summarize_matches([]).total == 0


class TestInMemoryCatalogProvider:
    def test_active_only(self):
        provider = InMemoryCatalogProvider([
            Opportunity(id="a"),
            Opportunity(id="b", is_active=False),
        ])
        assert [o.id for o in provider.get_active()] == ["a"]


class TestCatalogSearch:
    @pytest.fixture
    def provider(self):
        return InMemoryCatalogProvider(SAMPLE_CATALOG)

    def test_no_filters_returns_active(self, provider):
        assert [o.id for o in provider.search()] == ["1", "2", "3", "4", "5"]

    def test_term_matches_title_organization_or_description(self, provider):
        assert [o.id for o in provider.search(term="corp")] == ["1", "3"]
        assert [o.id for o in provider.search(term="MOBILE")] == ["5"]
        assert [o.id for o in provider.search(term="Data Analytics")] == ["1"]

    def test_category_is_exact(self, provider):
        assert [o.id for o in provider.search(category="Business")] == ["3", "4"]
        assert provider.search(category="busi") == []

    def test_all_disables_category_and_location(self, provider):
        assert len(provider.search(category="all", location="all")) == 5

    def test_location_substring(self, provider):
        assert [o.id for o in provider.search(location="maharashtra")] == ["1", "4"]

    def test_filters_combine(self, provider):
        assert [o.id for o in provider.search(category="business", location="Pune")] == ["4"]
        assert [o.id for o in provider.search(term="corp", category="tech")] == ["1"]
        assert provider.search(term="design", location="Delhi") == []

    def test_inactive_never_listed(self):
        provider = InMemoryCatalogProvider([
            Opportunity(id="a", title="Data Intern"),
            Opportunity(id="b", title="Data Intern", is_active=False),
        ])
        assert [o.id for o in provider.search(term="data")] == ["a"]


class TestApplicationsLabel:
    def test_with_cap(self):
        opp = Opportunity(current_applications=12, max_applications=50)
        assert opp.applications_label == "12/50 applied"
        assert not opp.is_full

    def test_without_cap(self):
        opp = Opportunity(current_applications=3)
        assert opp.applications_label == "3 applied"
        assert not opp.is_full

    def test_full(self):
        assert Opportunity(current_applications=40, max_applications=40).is_full
