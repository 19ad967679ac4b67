from typing import TYPE_CHECKING
from ...domain.repositories.employee_repository import EmployeeRepository
from ...application.services.employee_query_builder import EmployeeQueryBuilder
from ...application.use_cases.employee.create_employee import CreateEmployeeUseCase
from ...application.use_cases.employee.list_employees import ListEmployeesUseCase
from ...application.use_cases.employee.update_employee import UpdateEmployeeUseCase
from ...application.use_cases.employee.delete_employee import DeleteEmployeeUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class EmployeeProvider:
    """Employee use case provider - registers all employee-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the query builder and all employee use cases.
        Use cases are created on-demand via factories.
        """
        container.register_singleton(EmployeeQueryBuilder, EmployeeQueryBuilder())

        container.register_factory(
            CreateEmployeeUseCase,
            lambda: CreateEmployeeUseCase(
                employee_repository=container.get(EmployeeRepository),
            )
        )

        container.register_factory(
            ListEmployeesUseCase,
            lambda: ListEmployeesUseCase(
                employee_repository=container.get(EmployeeRepository),
                query_builder=container.get(EmployeeQueryBuilder),
            )
        )

        container.register_factory(
            UpdateEmployeeUseCase,
            lambda: UpdateEmployeeUseCase(
                employee_repository=container.get(EmployeeRepository),
            )
        )

        container.register_factory(
            DeleteEmployeeUseCase,
            lambda: DeleteEmployeeUseCase(
                employee_repository=container.get(EmployeeRepository),
            )
        )
