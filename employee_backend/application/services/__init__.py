from .employee_query_builder import MAX_PAGE, EmployeeQueryBuilder, parse_page, build_first_name_pattern

__all__ = ["MAX_PAGE", "EmployeeQueryBuilder", "parse_page", "build_first_name_pattern"]
