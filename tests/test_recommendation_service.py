"""Tests for the recommendation service."""

import asyncio
import json

import pytest

from staffing_service.errors import CollaboratorFailure, ExtractionFailure, NotFoundError
from staffing_service.services.recommendation import (
    COLLABORATOR_FAILED_REASONING,
    DEFAULT_BUSINESS_UNIT_INSIGHTS,
    DEFAULT_TEAM_DYNAMICS,
    EXTRACTION_FAILED_REASONING,
    RecommendationService,
    business_unit_id,
    extract_json,
    parse_requirements,
)

REQUIREMENTS = {
    "task_description": "Build a customer dashboard",
    "required_hard_skills": ["React"],
    "required_soft_skills": ["Communication"],
    "location": "Seattle",
    "business_units": ["Customer Success"],
    "knowledge_required": True,
    "roles": ["Developer"],
}


def responder(requirements_text, narrative="Generated narrative."):
    """Answer extraction prompts with requirements and everything else with a narrative."""

    async def _generate(prompt):
        if "Extract the key task requirements" in prompt:
            return requirements_text
        return narrative

    return _generate


def test_extract_json_strips_surrounding_text():
    text = 'Sure! Here it is:\n```json\n{"roles": ["Developer"]}\n```'
    assert extract_json(text) == '{"roles": ["Developer"]}'


def test_parse_requirements():
    requirements = parse_requirements(json.dumps(REQUIREMENTS))

    assert requirements.required_hard_skills == ["React"]
    assert requirements.location == "Seattle"
    assert requirements.project_context is None


def test_parse_requirements_rejects_malformed_text():
    with pytest.raises(ExtractionFailure):
        parse_requirements("I could not find any requirements")
    with pytest.raises(ExtractionFailure):
        parse_requirements('{"required_hard_skills": "React"}')


def test_parse_requirements_drops_unknown_project_context_values():
    text = json.dumps(
        dict(
            REQUIREMENTS,
            location="null",
            project_context={
                "project_phase": "development",
                "project_type": "web application",
                "target_delivery_date": "null",
                "project_goals": ["Launch beta"],
            },
        )
    )

    requirements = parse_requirements(text)

    assert requirements.required_hard_skills == ["React"]
    assert requirements.location is None
    assert requirements.project_context.project_phase == "development"
    assert requirements.project_context.project_type == "prototype"
    assert requirements.project_context.target_delivery_date is None
    assert requirements.project_context.project_goals == ["Launch beta"]


def test_parse_requirements_rejects_non_object_json():
    with pytest.raises(ExtractionFailure):
        parse_requirements('["React", "Python"]')


def test_business_unit_id():
    assert business_unit_id("Customer  Success") == "bu_customer_success"


@pytest.mark.asyncio
async def test_process_request(context, generator):
    generator.generate.side_effect = responder(json.dumps(REQUIREMENTS))
    service = RecommendationService(context, generator)

    result = await service.process_request("I need a React developer in Seattle")

    assert [e.id for e in result.matching_employees] == ["emp001"]
    assert [t.id for t in result.tasks] == ["task001"]
    assert result.tasks[0].business_unit_relevance[0].business_unit_name == "Customer Success"
    assert result.tasks[0].business_unit_relevance[0].relevance_level == 4
    assert result.reasoning == "Generated narrative."
    assert result.team_recommendation.assignments == {"emp001": "Developer"}
    assert result.team_recommendation.team_dynamics == "Generated narrative."
    assert generator.generate.await_count == 4


@pytest.mark.asyncio
async def test_process_request_does_not_mutate_tasks(context, generator):
    generator.generate.side_effect = responder(json.dumps(REQUIREMENTS))
    service = RecommendationService(context, generator)

    await service.process_request("I need a React developer in Seattle")

    assert context.get_task("task001").business_unit_relevance == []


@pytest.mark.asyncio
async def test_off_list_project_type_keeps_extracted_requirements(context, generator):
    requirements = dict(REQUIREMENTS, project_context={"project_type": "web application"})
    generator.generate.side_effect = responder(json.dumps(requirements))
    service = RecommendationService(context, generator)

    result = await service.process_request("I need a React developer in Seattle for a web app")

    assert result.reasoning == "Generated narrative."
    assert [e.id for e in result.matching_employees] == ["emp001"]
    assert result.project_context.project_type == "prototype"


@pytest.mark.asyncio
async def test_malformed_extraction_returns_default_result(context, generator):
    generator.generate.return_value = "not json at all"
    service = RecommendationService(context, generator)

    result = await service.process_request("Find me someone")

    assert result.reasoning == EXTRACTION_FAILED_REASONING
    assert [e.id for e in result.matching_employees] == ["emp001", "emp002", "emp003"]
    assert [t.id for t in result.tasks] == ["task001", "task002"]
    assert result.team_recommendation is None


@pytest.mark.asyncio
async def test_unavailable_generator_returns_default_result(context, generator):
    generator.generate.side_effect = CollaboratorFailure("connection refused")
    service = RecommendationService(context, generator)

    result = await service.process_request("Find me someone")

    assert result.reasoning == COLLABORATOR_FAILED_REASONING
    assert len(result.matching_employees) == 3


@pytest.mark.asyncio
async def test_generator_timeout(context, generator):
    async def slow(prompt):
        await asyncio.sleep(1)
        return "{}"

    generator.generate.side_effect = slow
    service = RecommendationService(context, generator, timeout=0.01)

    with pytest.raises(CollaboratorFailure):
        await service.extract_requirements("Find me someone")


@pytest.mark.asyncio
async def test_narrative_failure_uses_defaults(context, generator):
    requirements_text = json.dumps(REQUIREMENTS)

    async def _generate(prompt):
        if "Extract the key task requirements" in prompt:
            return requirements_text
        raise RuntimeError("model overloaded")

    generator.generate.side_effect = _generate
    service = RecommendationService(context, generator)

    result = await service.process_request("I need a React developer in Seattle")

    assert result.reasoning == COLLABORATOR_FAILED_REASONING
    assert result.team_recommendation.team_dynamics == DEFAULT_TEAM_DYNAMICS
    assert result.team_recommendation.business_unit_insights == DEFAULT_BUSINESS_UNIT_INSIGHTS
    assert [e.id for e in result.matching_employees] == ["emp001"]


@pytest.mark.asyncio
async def test_unmatched_location_falls_back_to_first_employees(context, generator):
    requirements = dict(REQUIREMENTS, location="Tokyo")
    generator.generate.side_effect = responder(json.dumps(requirements))
    service = RecommendationService(context, generator)

    result = await service.process_request("React developer in Tokyo")

    assert [e.id for e in result.matching_employees] == ["emp001", "emp002", "emp003"]


@pytest.mark.asyncio
async def test_mature_phase_keeps_reallocatable_employees(context, generator):
    context.employees[0].current_project_phase = "development"
    context.employees[1].current_project_phase = "mature"
    requirements = dict(REQUIREMENTS, location=None, project_context={"project_phase": "mature"})
    generator.generate.side_effect = responder(json.dumps(requirements))
    service = RecommendationService(context, generator)

    result = await service.process_request("React work on a mature product")

    assert [e.id for e in result.matching_employees] == ["emp002"]


@pytest.mark.asyncio
async def test_recommend_team_with_empty_pool(context, generator):
    service = RecommendationService(context, generator)

    team = await service.recommend_team([], ["Developer"])

    assert team.assignments == {"emp001": "Team Lead", "emp002": "Developer", "emp003": "Analyst"}
    generator.generate.assert_not_awaited()


@pytest.mark.asyncio
async def test_generate_team_recommendation(context, generator):
    generator.generate.side_effect = responder(json.dumps(REQUIREMENTS))
    service = RecommendationService(context, generator)

    team = await service.generate_team_recommendation("I need a React developer in Seattle")

    assert team.assignments == {"emp001": "Developer"}
    assert team.business_unit_insights == "Generated narrative."


def test_extract_task_id(context, generator):
    service = RecommendationService(context, generator)

    assert service.extract_task_id("How hard is TASK001?") == "task001"
    assert service.extract_task_id("Look at task-42 please") == "task-42"
    assert service.extract_task_id("Analyze the quarterly churn report work") == "task002"
    assert service.extract_task_id("Nothing to see here") is None


def test_analyze_request(context, generator):
    service = RecommendationService(context, generator)

    analysis = service.analyze_request("Can you analyze task001?")

    assert analysis.task_id == "task001"
    assert analysis.complexity_level == "High"


def test_analyze_request_without_task(context, generator):
    service = RecommendationService(context, generator)

    with pytest.raises(NotFoundError):
        service.analyze_request("What is the weather like?")
