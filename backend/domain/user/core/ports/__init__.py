from domain.user.core.ports.user_repository import IUserRepository

__all__ = ["IUserRepository"]
