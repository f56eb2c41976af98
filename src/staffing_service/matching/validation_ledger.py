"""Skill validation ledger.

Append-only log of skill assessments. A stored proficiency changes only when
a manager rates the skill, or when at least two assessments of the same
skill within the trailing window all agree on the new rating.
"""

import logging
import re
import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable

from ..database import DataContext
from ..errors import InvalidInputError, NotFoundError
from ..models.assessment import Assessment, AssessmentType, SkillRating
from ..models.skill import as_utc

logger = logging.getLogger("validation_ledger")

DEFAULT_MANAGER_IDS = frozenset({"emp005", "emp007", "emp008"})
CONSENSUS_MIN_ASSESSMENTS = 2
ID_PREFIX = "assess"
ID_SUFFIX = re.compile(r"(\d+)$")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SkillValidationLedger:
    """Records assessments against the context's employees."""

    def __init__(
        self,
        context: DataContext,
        manager_ids: Iterable[str] = DEFAULT_MANAGER_IDS,
        window_days: int = 90,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.context = context
        self.manager_ids = frozenset(manager_ids)
        self.window = timedelta(days=window_days)
        self.clock = clock
        self._lock = threading.Lock()

    def classify(self, subject_id: str, assessor_id: str) -> AssessmentType:
        """Determine the assessment type from who is assessing whom."""
        if assessor_id == subject_id:
            return "self"
        if assessor_id in self.manager_ids:
            return "manager"
        return "peer"

    def _next_id(self) -> str:
        """Next id after the highest numeric suffix already in the log."""
        highest = 0
        for existing in self.context.assessments:
            match = ID_SUFFIX.search(existing.id)
            if match:
                highest = max(highest, int(match.group(1)))
        return f"{ID_PREFIX}{highest + 1:03d}"

    def assessments_for(self, employee_id: str) -> list[Assessment]:
        """Get the assessment history of an employee."""
        return [a for a in self.context.assessments if a.employee_id == employee_id]

    def record_assessment(
        self,
        subject_id: str,
        skill_id: str,
        assessor_id: str,
        new_rating: int,
        comment: str = "",
    ) -> Assessment:
        """Append an assessment and apply the consensus update rule.

        Args:
            subject_id: Employee being assessed
            skill_id: Skill owned by the subject
            assessor_id: Employee performing the assessment
            new_rating: Proposed proficiency (1-5)
            comment: Assessor's comment

        Returns:
            The appended assessment

        Raises:
            NotFoundError: Unknown employee or skill not owned by the employee
            InvalidInputError: Rating outside 1-5
        """
        employee = self.context.get_employee(subject_id)
        skill = employee.find_skill(skill_id)
        if skill is None:
            raise NotFoundError("Skill", f"{skill_id} for employee {subject_id}")
        if not 1 <= new_rating <= 5:
            raise InvalidInputError(f"Rating must be between 1 and 5, got {new_rating}")

        assessment_type = self.classify(subject_id, assessor_id)

        with self._lock:
            now = as_utc(self.clock())
            assessment = Assessment(
                id=self._next_id(),
                date=now,
                type=assessment_type,
                assessor_id=assessor_id,
                employee_id=subject_id,
                quarter=(now.month - 1) // 3 + 1,
                year=now.year,
                skills_assessed=(
                    SkillRating(
                        skill_id=skill_id,
                        previous_rating=skill.proficiency,
                        new_rating=new_rating,
                        comments=comment,
                    ),
                ),
                overall_comments=f"Assessment for {skill.name}",
            )
            self.context.assessments.append(assessment)

            recent = [
                a
                for a in self.context.assessments
                if a.employee_id == subject_id
                and a.rating_for(skill_id) is not None
                and now - a.date < self.window
            ]
            consensus = len(recent) >= CONSENSUS_MIN_ASSESSMENTS and all(
                a.rating_for(skill_id).new_rating == new_rating for a in recent
            )

            if assessment_type == "manager" or consensus:
                skill.proficiency = new_rating
                skill.last_validated = now
                if assessor_id not in skill.validated_by:
                    skill.validated_by.append(assessor_id)
                logger.info(
                    f"Updated {skill.name} for {subject_id} to {new_rating} "
                    f"({assessment_type} assessment by {assessor_id})"
                )
            else:
                logger.info(
                    f"Recorded {assessment_type} assessment {assessment.id} for {subject_id}; "
                    f"proficiency of {skill.name} unchanged"
                )

        return assessment
