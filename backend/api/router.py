from fastapi import APIRouter, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import (
    get_catalog,
    get_engine,
    get_extractor,
    get_gap_analyzer,
    get_scorer,
    get_taxonomy,
)
from config import settings
from models.requests import ExtractRequest, MatchRequest, NormalizeRequest, RecommendRequest
from models.responses import APIResponse, HealthData, SearchResponse
from services.catalog import ResourceCatalog
from services.gap_analyzer import GapAnalyzer
from services.recommendation.engine import RecommendationEngine
from services.scorer import Scorer
from services.skill_extractor import SkillExtractor
from services.taxonomy import DEFAULT_SEARCH_LIMIT, Taxonomy

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("/health", response_model=APIResponse)
async def health(
    taxonomy: Taxonomy = Depends(get_taxonomy),
    catalog: ResourceCatalog = Depends(get_catalog),
):
    return APIResponse(data=HealthData(skills_loaded=len(taxonomy), resources_loaded=len(catalog)))


@router.post("/score", response_model=APIResponse)
@limiter.limit(settings.rate_limit)
def score(request: Request, body: MatchRequest, scorer: Scorer = Depends(get_scorer)):
    return APIResponse(data=scorer.score(body.profile, body.job))


@router.post("/gaps", response_model=APIResponse)
@limiter.limit(settings.rate_limit)
def gaps(request: Request, body: MatchRequest, analyzer: GapAnalyzer = Depends(get_gap_analyzer)):
    return APIResponse(data=analyzer.analyze(body.profile, body.job))


@router.post("/recommend", response_model=APIResponse)
@limiter.limit(settings.rate_limit)
def recommend(request: Request, body: RecommendRequest, engine: RecommendationEngine = Depends(get_engine)):
    return APIResponse(data=engine.generate(body.profile, body.job, body.preferences))


@router.post("/normalize", response_model=APIResponse)
@limiter.limit(settings.rate_limit)
def normalize(request: Request, body: NormalizeRequest, taxonomy: Taxonomy = Depends(get_taxonomy)):
    return APIResponse(data=taxonomy.normalize_many(body.skills))


@router.post("/extract", response_model=APIResponse)
@limiter.limit(settings.rate_limit)
def extract(request: Request, body: ExtractRequest, extractor: SkillExtractor = Depends(get_extractor)):
    return APIResponse(data=extractor.extract(body.text, include_unknown=body.include_unknown))


@router.get("/lookup", response_model=APIResponse)
async def lookup(
    id: str = Query(..., min_length=1, max_length=100),
    taxonomy: Taxonomy = Depends(get_taxonomy),
):
    node = taxonomy.lookup(id)
    if node is None:
        raise HTTPException(status_code=404, detail=f"Skill not found: {id}")
    return APIResponse(data=node)


@router.get("/search", response_model=SearchResponse)
async def search(
    q: str = Query("", max_length=100),
    domain: str = "",
    category: str = "",
    limit: int = Query(DEFAULT_SEARCH_LIMIT, ge=0, le=500),
    taxonomy: Taxonomy = Depends(get_taxonomy),
):
    results = taxonomy.search(q, domain=domain, category=category, limit=limit)
    return SearchResponse(data=results, total=len(results))
