"""User commands."""

from .login_user import LoginUserCommand
from .register_user import RegisterUserCommand

__all__ = ["LoginUserCommand", "RegisterUserCommand"]
