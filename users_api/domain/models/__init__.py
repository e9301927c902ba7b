from .user import User, UpdatableFields

__all__ = ["User", "UpdatableFields"]
