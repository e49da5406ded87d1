from models.user import User, Username
from models.session import Session, is_expired

__all__ = ["User", "Username", "Session", "is_expired"]
