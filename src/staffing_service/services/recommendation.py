"""Recommendation service - turns free-text staffing requests into matches."""

import asyncio
import json
import logging
import re
from typing import Optional

from pydantic import ValidationError

from ..database import DataContext
from ..errors import CollaboratorFailure, ExtractionFailure, NotFoundError
from ..matching.aggregator import EMPLOYEE_THRESHOLD, TaskFitAggregator
from ..matching.task_analyzer import TaskAnalyzer
from ..matching.team_assembler import (
    assemble_team,
    default_roles_for,
    team_formation_attributes,
)
from ..models.analysis import TaskAnalysis
from ..models.employee import Employee
from ..models.recommendation import ExtractedRequirements, RecommendationResult
from ..models.task import BusinessUnitRelevance, ProjectContext, Task
from ..models.team import TeamRecommendation
from ..repositories.task_repo import TaskRepository
from .llm import TextGenerator, truncate

logger = logging.getLogger("recommendation_service")

DEFAULT_EMPLOYEE_COUNT = 3
DEFAULT_TASK_COUNT = 2
DEFAULT_BUSINESS_UNIT_RELEVANCE = 4
DEFAULT_TEAM_ROLES = ["Team Lead", "Developer", "Analyst"]
REQUEST_TEAM_ROLES = ["Developer", "Analyst", "Project Manager"]

EXTRACTION_FAILED_REASONING = (
    "Failed to extract task requirements from the request, but here are some potential matches."
)
COLLABORATOR_FAILED_REASONING = (
    "Sorry, the reasoning service is unavailable right now. "
    "The matches below were ranked by skill, license, location and capacity fit."
)
DEFAULT_TEAM_DYNAMICS = "Team dynamics insights are unavailable for this team."
DEFAULT_BUSINESS_UNIT_INSIGHTS = "No specific business unit insights available for this team."

TASK_ID_PATTERN = re.compile(r"\btask-?\d+\b", re.IGNORECASE)
JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")
EMPTY_VALUES = (None, "", "null", "none")

EXTRACTION_PROMPT = """
Extract the key task requirements and project context from the following request:
"{request}"

Return a JSON object with the following structure:
{{
  "task_description": "extracted task description",
  "task_purpose": "extracted purpose",
  "required_hard_skills": ["skill1", "skill2"],
  "required_soft_skills": ["skill1", "skill2"],
  "location": "extracted location or null",
  "project_context": {{
    "project_phase": "inception/development/mature/maintenance",
    "project_type": "prototype/product/service/internal/research",
    "project_goals": ["goal1", "goal2"],
    "target_delivery_date": "YYYY-MM-DD or null"
  }},
  "business_units": ["Sales", "Marketing"],
  "knowledge_required": true,
  "roles": ["role1", "role2"]
}}

IMPORTANT: Your response must contain ONLY the JSON object, with no additional text before or after.
Do not wrap the JSON in markdown code blocks, quotes, or any other formatting.
"""

REASONING_PROMPT = """
I need to match employees to the following project requirements:
{requirements}

Here are the identified tasks:
{tasks}

Here are the potential matching employees:
{employees}

Here's the recommended team:
{team}

Provide a detailed explanation of why these employees match the project requirements.
Focus on:
1. Their hard skills and soft skills in relation to the task requirements
2. Their experience and how it relates to the project context
3. Business unit knowledge that might be beneficial
4. Team dynamics and how the recommended team would work together
5. Availability and location considerations

Format your response in Markdown, as if speaking directly to the manager who made the request.
Highlight 2-3 key employees that are particularly good matches.
If there are employees from mature projects who could be reallocated, specifically mention this.
"""

TEAM_DYNAMICS_PROMPT = """
Analyze the team dynamics for the following team members:
{members}

Provide insights on how this team would work together, considering:
1. Communication styles
2. Leadership dynamics
3. Potential challenges and how to address them
4. Recommendations for team formation activities

Keep your response concise and actionable.
"""

BUSINESS_UNIT_PROMPT = """
Analyze the business unit knowledge for the following team members:
{members}

In relation to these relevant business units:
{units}

Provide insights on how the team's business knowledge can benefit the project.
Identify any knowledge gaps and suggest ways to address them.

Keep your response concise and actionable.
"""


def extract_json(text: str) -> str:
    """Pull the outermost JSON object out of surrounding text."""
    match = JSON_OBJECT_PATTERN.search(text or "")
    return match.group(0) if match else text


def parse_project_context(raw) -> Optional[ProjectContext]:
    """Keep the project context fields that validate, defaulting the rest."""
    if not isinstance(raw, dict):
        return None

    fields = {}
    for name, value in raw.items():
        if name not in ProjectContext.model_fields or value in EMPTY_VALUES:
            continue
        try:
            ProjectContext.model_validate({name: value})
        except ValidationError:
            logger.warning(f"Ignoring project context field {name}={value!r}")
            continue
        fields[name] = value
    return ProjectContext.model_validate(fields)


def parse_requirements(text: str) -> ExtractedRequirements:
    """Parse a text generator response into structured requirements.

    Raises:
        ExtractionFailure: The response holds no JSON object, or its
            top-level fields have the wrong shape
    """
    try:
        data = json.loads(extract_json(text))
    except ValueError as e:
        raise ExtractionFailure(f"Could not parse extracted requirements: {e}") from e
    if not isinstance(data, dict):
        raise ExtractionFailure(f"Expected a JSON object, got {type(data).__name__}")

    project_context = parse_project_context(data.pop("project_context", None))
    if data.get("location") in EMPTY_VALUES:
        data["location"] = None

    try:
        requirements = ExtractedRequirements.model_validate(data)
    except ValidationError as e:
        raise ExtractionFailure(f"Could not parse extracted requirements: {e}") from e
    requirements.project_context = project_context
    return requirements


def _dump(value) -> str:
    return json.dumps(value, indent=2, default=str)


def business_unit_id(name: str) -> str:
    return "bu_" + re.sub(r"\s+", "_", name.lower())


class RecommendationService:
    """Orchestrates extraction, scoring, team assembly and narratives."""

    def __init__(
        self,
        context: DataContext,
        generator: TextGenerator,
        timeout: float = 60.0,
        threshold: int = EMPLOYEE_THRESHOLD,
    ):
        self.context = context
        self.generator = generator
        self.timeout = timeout
        self.threshold = threshold
        self.aggregator = TaskFitAggregator(context)
        self.analyzer = TaskAnalyzer(context)
        self.tasks = TaskRepository(context)

    async def _generate(self, prompt: str) -> str:
        """Call the text generator, bounded by the configured timeout."""
        try:
            return await asyncio.wait_for(self.generator.generate(prompt), timeout=self.timeout)
        except CollaboratorFailure:
            raise
        except Exception as e:
            raise CollaboratorFailure(f"Text generation failed: {e!r}") from e

    async def _narrate(self, prompt: str, default: str) -> str:
        """Generate a narrative, substituting a fixed text on failure."""
        try:
            return await self._generate(prompt)
        except CollaboratorFailure as e:
            logger.error(f"Narrative generation failed, using default: {e}")
            return default

    def default_result(self, reasoning: str) -> RecommendationResult:
        """Small non-empty result used when requirements cannot be extracted."""
        return RecommendationResult(
            matching_employees=self.context.employees[:DEFAULT_EMPLOYEE_COUNT],
            tasks=self.context.tasks[:DEFAULT_TASK_COUNT],
            reasoning=reasoning,
        )

    async def extract_requirements(self, request: str) -> ExtractedRequirements:
        """Ask the text generator for structured requirements."""
        response = await self._generate(EXTRACTION_PROMPT.format(request=request))
        requirements = parse_requirements(response)
        logger.info(f"Extracted requirements: {requirements.model_dump_json()}")
        return requirements

    def find_candidates(self, requirements: ExtractedRequirements, tasks: list[Task]) -> list[Employee]:
        """Union of ranked employees over tasks, narrowed by location and phase."""
        seen: dict[str, Employee] = {}
        for task in tasks:
            for match in self.aggregator.employees_for_task(task.id, self.threshold):
                seen.setdefault(match.employee.id, match.employee)
        candidates = list(seen.values())

        if requirements.location:
            location = requirements.location.lower()
            candidates = [e for e in candidates if location in e.location.lower()]

        context = requirements.project_context
        if context and context.project_phase == "mature":
            candidates = [
                e for e in candidates if e.current_project_phase in (None, "mature")
            ]

        if not candidates:
            candidates = self.context.employees[:DEFAULT_EMPLOYEE_COUNT]
        return candidates

    async def process_request(self, request: str) -> RecommendationResult:
        """Find matching employees, tasks and a team for a free-text request."""
        logger.info(f"Processing request: {truncate(request, 100)}")

        try:
            requirements = await self.extract_requirements(request)
        except ExtractionFailure as e:
            logger.error(f"Extraction failed: {e}")
            return self.default_result(EXTRACTION_FAILED_REASONING)
        except CollaboratorFailure as e:
            logger.error(f"Extraction call failed: {e}")
            return self.default_result(COLLABORATOR_FAILED_REASONING)

        project_context = requirements.project_context or ProjectContext()
        relevance = [
            BusinessUnitRelevance(
                business_unit_id=business_unit_id(unit),
                business_unit_name=unit,
                relevance_level=DEFAULT_BUSINESS_UNIT_RELEVANCE,
                knowledge_required=requirements.knowledge_required,
            )
            for unit in requirements.business_units
        ]

        tasks = self.tasks.find_by_skills(requirements.required_hard_skills)
        if requirements.required_hard_skills:
            tasks = [
                t.model_copy(update={"project_context": project_context, "business_unit_relevance": relevance})
                for t in tasks
            ]

        candidates = self.find_candidates(requirements, tasks)
        roles = requirements.roles or default_roles_for(project_context.project_type)
        team = await self.recommend_team(candidates, roles, relevance)

        reasoning = await self._narrate(
            REASONING_PROMPT.format(
                requirements=requirements.model_dump_json(indent=2),
                tasks=_dump(
                    [
                        t.model_dump(
                            mode="json",
                            include={"id", "description", "purpose", "required_hard_skills", "required_soft_skills"},
                        )
                        for t in tasks
                    ]
                ),
                employees=_dump([self._employee_brief(e) for e in candidates]),
                team=_dump(team.assignments),
            ),
            COLLABORATOR_FAILED_REASONING,
        )

        return RecommendationResult(
            matching_employees=candidates,
            tasks=tasks,
            reasoning=reasoning,
            project_context=project_context,
            team_recommendation=team,
        )

    async def recommend_team(
        self,
        candidates: list[Employee],
        roles: list[str],
        relevance: Optional[list[BusinessUnitRelevance]] = None,
    ) -> TeamRecommendation:
        """Assemble a team and attach generated narratives."""
        relevance = relevance or []

        if not candidates:
            defaults = self.context.employees[:DEFAULT_EMPLOYEE_COUNT]
            return TeamRecommendation(
                assignments={e.id: role for e, role in zip(defaults, DEFAULT_TEAM_ROLES)},
                team_members=defaults,
                team_dynamics="This is a default team as no matching employees were found.",
                business_unit_insights=DEFAULT_BUSINESS_UNIT_INSIGHTS,
            )

        assembly = assemble_team(candidates, roles, relevance)

        members = [
            {
                "name": e.name,
                "role": assembly.assignments[e.id],
                "soft_skills": [f"{s.name} ({s.proficiency})" for s in e.soft_skills],
                "team_formation_attributes": team_formation_attributes(e),
            }
            for e in assembly.team_members
        ]
        team_dynamics = await self._narrate(
            TEAM_DYNAMICS_PROMPT.format(members=_dump(members)),
            DEFAULT_TEAM_DYNAMICS,
        )

        knowledge = [
            {
                "name": e.name,
                "role": assembly.assignments[e.id],
                "business_unit_knowledge": [
                    {
                        "business_unit": bu.business_unit_name,
                        "knowledge_level": bu.knowledge_level,
                        "experience": bu.years_of_experience,
                    }
                    for bu in e.business_unit_knowledge
                ],
            }
            for e in assembly.team_members
        ]
        business_unit_insights = await self._narrate(
            BUSINESS_UNIT_PROMPT.format(
                members=_dump(knowledge),
                units=_dump([r.model_dump() for r in relevance]),
            ),
            DEFAULT_BUSINESS_UNIT_INSIGHTS,
        )

        return TeamRecommendation(
            **assembly.model_dump(),
            team_dynamics=team_dynamics,
            business_unit_insights=business_unit_insights,
        )

    async def generate_team_recommendation(self, request: str) -> TeamRecommendation:
        """Recommend a team for a free-text request."""
        result = await self.process_request(request)
        if result.team_recommendation:
            return result.team_recommendation
        return await self.recommend_team(result.matching_employees, REQUEST_TEAM_ROLES)

    def extract_task_id(self, message: str) -> Optional[str]:
        """Find a task ID, or a mentioned task description, in a message."""
        match = TASK_ID_PATTERN.search(message)
        if match:
            found = match.group(0)
            for task in self.context.tasks:
                if task.id.lower() == found.lower():
                    return task.id
            return found

        lowered = message.lower()
        for task in self.context.tasks:
            if task.description.lower() in lowered:
                return task.id
        return None

    def analyze_request(self, message: str) -> TaskAnalysis:
        """Analyze the task referenced in a free-text message."""
        task_id = self.extract_task_id(message)
        if task_id is None:
            raise NotFoundError("Task", f"referenced in {truncate(message, 50)!r}")
        return self.analyzer.analyze_task(task_id)

    @staticmethod
    def _employee_brief(employee: Employee) -> dict:
        return {
            "id": employee.id,
            "name": employee.name,
            "hard_skills": [f"{s.name} ({s.proficiency})" for s in employee.hard_skills],
            "soft_skills": [f"{s.name} ({s.proficiency})" for s in employee.soft_skills],
            "past_experience": [exp.description for exp in employee.past_experience],
            "career_aspirations": employee.career_aspirations,
            "capacity": employee.capacity,
            "location": employee.location,
            "current_project_phase": employee.current_project_phase,
            "business_unit_knowledge": [
                f"{bu.business_unit_name} ({bu.knowledge_level})" for bu in employee.business_unit_knowledge
            ],
        }
