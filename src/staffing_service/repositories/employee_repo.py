"""Employee repository over the in-memory data context."""

from ..database import DataContext
from ..models.employee import Employee
from ..models.experience import Experience


class EmployeeRepository:
    """Read queries for employees."""

    def __init__(self, context: DataContext):
        self.context = context

    def list_all(self, skip: int = 0, limit: int = 100) -> list[Employee]:
        """List employees with pagination, in dataset order."""
        return self.context.employees[skip : skip + limit]

    def get_by_id(self, employee_id: str) -> Employee:
        """Get an employee by ID."""
        return self.context.get_employee(employee_id)

    def get_many(self, employee_ids: list[str]) -> list[Employee]:
        """Get several employees, preserving the requested order."""
        return [self.context.get_employee(employee_id) for employee_id in employee_ids]

    def by_project_phase(self, phase: str) -> list[Employee]:
        """Employees currently on a project in the given phase."""
        return [e for e in self.context.employees if e.current_project_phase == phase]

    def by_business_unit(self, business_unit_name: str) -> list[Employee]:
        """Employees with knowledge of a business unit (case-insensitive)."""
        wanted = business_unit_name.lower()
        return [
            e
            for e in self.context.employees
            if any(bu.business_unit_name.lower() == wanted for bu in e.business_unit_knowledge)
        ]

    def experiences_for(self, employee_id: str) -> list[Experience]:
        """Past experience records of an employee."""
        return list(self.context.get_employee(employee_id).past_experience)

    def search(self, query_text: str, limit: int = 20) -> list[Employee]:
        """Search employees by name, position or location."""
        query = query_text.lower()
        return [
            e
            for e in self.context.employees
            if query in e.name.lower() or query in e.position.lower() or query in e.location.lower()
        ][:limit]
