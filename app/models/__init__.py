from app.models.user import User, Role
from app.models.tutor import Tutor

__all__ = ["User", "Role", "Tutor"]
