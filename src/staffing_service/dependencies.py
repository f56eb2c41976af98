"""FastAPI dependencies resolving per-application components."""

from fastapi import Request

from .database import DataContext
from .matching.aggregator import TaskFitAggregator
from .matching.task_analyzer import TaskAnalyzer
from .matching.validation_ledger import SkillValidationLedger
from .services.recommendation import RecommendationService


def get_context(request: Request) -> DataContext:
    return request.app.state.context


def get_aggregator(request: Request) -> TaskFitAggregator:
    return TaskFitAggregator(request.app.state.context)


def get_analyzer(request: Request) -> TaskAnalyzer:
    return TaskAnalyzer(request.app.state.context)


def get_ledger(request: Request) -> SkillValidationLedger:
    return request.app.state.ledger


def get_recommendation_service(request: Request) -> RecommendationService:
    return request.app.state.recommendation
