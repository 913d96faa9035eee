from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_catalog_provider, get_external_scorer
from config import settings
from models.requests import AnalyzeGapsRequest, RankRequest
from models.responses import CategoriesResponse, OpportunitiesResponse, OpportunityListing, RankResponse
from models.schemas.insights import CatalogInsights
from models.schemas.skill_gap import GapAnalysis
from services import gemini_client, insights, skill_taxonomy
from services.catalog import CatalogProvider
from services.engine import gap_analyzer, ranking
from services.engine.base import BaseScorer
from services.errors import InvalidInput

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": gemini_client.is_configured(),
        "scorer_enabled": settings.scorer_enabled,
    }


@router.get("/categories", response_model=CategoriesResponse)
async def categories():
    return CategoriesResponse(categories=skill_taxonomy.categories())


@router.get("/opportunities", response_model=OpportunitiesResponse)
async def opportunities(
    search: str = "",
    category: str = "",
    location: str = "",
    catalog_provider: CatalogProvider = Depends(get_catalog_provider),
):
    found = catalog_provider.search(search, category, location)
    return OpportunitiesResponse(
        total=len(found),
        opportunities=[
            OpportunityListing(opportunity=o, applications=o.applications_label, is_full=o.is_full)
            for o in found
        ],
    )


@router.get("/insights", response_model=CatalogInsights)
async def catalog_insights(catalog_provider: CatalogProvider = Depends(get_catalog_provider)):
    return insights.catalog_insights(catalog_provider.get_active())


@router.post("/rank", response_model=RankResponse)
@limiter.limit("60/minute")
async def rank(
    request: Request,
    body: RankRequest,
    catalog_provider: CatalogProvider = Depends(get_catalog_provider),
    scorer: BaseScorer | None = Depends(get_external_scorer),
):
    catalog = body.catalog if body.catalog is not None else catalog_provider.get_active()
    try:
        results = await ranking.rank(body.profile, catalog, top_n=body.top_n, scorer=scorer)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))

    methods = {r.scoring_method for r in results}
    if len(methods) > 1:
        scoring_method = "mixed"
    else:
        scoring_method = methods.pop() if methods else "fallback"

    return RankResponse(
        results=results,
        summary=insights.summarize_matches(results),
        degraded=any(r.scoring_method == "fallback" for r in results),
        scoring_method=scoring_method,
    )


@router.post("/analyze-gaps", response_model=GapAnalysis)
@limiter.limit("60/minute")
async def analyze_gaps(request: Request, body: AnalyzeGapsRequest):
    try:
        return gap_analyzer.analyze(body.profile, body.categories, max_priority=body.max_priority)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
