from .auth_controller import router as auth_router
from .employee_controller import router as employee_router


__all__ = ["auth_router", "employee_router"]
