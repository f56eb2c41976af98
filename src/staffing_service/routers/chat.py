"""Free-text chat endpoints backed by the text generator."""

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_recommendation_service
from ..errors import NotFoundError
from ..models.analysis import TaskAnalysis
from ..models.recommendation import ChatRequest, RecommendationResult
from ..models.team import TeamRecommendation
from ..services.recommendation import RecommendationService

router = APIRouter(prefix="/chat", tags=["Chat"])


@router.post("/process", response_model=RecommendationResult)
async def process_message(
    data: ChatRequest,
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationResult:
    """Match employees and tasks to a natural-language request."""
    return await service.process_request(data.message)


@router.post("/team-recommendation", response_model=TeamRecommendation)
async def recommend_team(
    data: ChatRequest,
    service: RecommendationService = Depends(get_recommendation_service),
) -> TeamRecommendation:
    """Recommend a team for a natural-language request."""
    return await service.generate_team_recommendation(data.message)


@router.post("/analyze", response_model=TaskAnalysis)
async def analyze_message(
    data: ChatRequest,
    service: RecommendationService = Depends(get_recommendation_service),
) -> TaskAnalysis:
    """Analyze the task mentioned in a message."""
    try:
        return service.analyze_request(data.message)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="No task found in message")
