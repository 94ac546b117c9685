"""Field validators for registration and login input.

Pure functions: every field is checked and all messages are returned at
once so the client can show them together.
"""

from dataclasses import dataclass, field
import re
from typing import Dict

# Basic local@domain shape, not a full RFC 5322 check.
EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9-]+(?:\.[a-zA-Z0-9-]+)*$"
)

INVALID_CHARACTERS_MESSAGE = "{} contains characters that cannot be encoded"


@dataclass(frozen=True)
class ValidationResult:
    """Field name -> message map plus validity flag."""

    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.errors


def is_blank(value: str) -> bool:
    return value.strip() == ""


def is_utf8_encodable(value: str) -> bool:
    """False for strings holding lone surrogates (legal in GraphQL input)."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.match(email) is not None


def validate_register_input(
    username: str, email: str, password: str, confirm_password: str
) -> ValidationResult:
    """Validate registration fields.

    Examples:
        >>> validate_register_input("ann", "ann@example.com", "pw", "pw").valid
        True
        >>> validate_register_input("ann", "nope", "pw", "px").errors
        {'email': 'Email must be a valid email address', 'confirmPassword': 'Passwords must match'}
    """
    errors: Dict[str, str] = {}

    if is_blank(username):
        errors["username"] = "Username must not be empty"
    elif not is_utf8_encodable(username):
        errors["username"] = INVALID_CHARACTERS_MESSAGE.format("Username")

    if is_blank(email):
        errors["email"] = "Email must not be empty"
    elif not is_valid_email(email):
        errors["email"] = "Email must be a valid email address"

    # Whitespace-only passwords are accepted, only the empty string is not.
    if password == "":
        errors["password"] = "Password must not be empty"
    elif not is_utf8_encodable(password):
        errors["password"] = INVALID_CHARACTERS_MESSAGE.format("Password")
    elif password != confirm_password:
        errors["confirmPassword"] = "Passwords must match"

    return ValidationResult(errors)


def validate_login_input(username: str, password: str) -> ValidationResult:
    """Validate login fields."""
    errors: Dict[str, str] = {}

    if is_blank(username):
        errors["username"] = "Username must not be empty"
    elif not is_utf8_encodable(username):
        errors["username"] = INVALID_CHARACTERS_MESSAGE.format("Username")

    if password == "":
        errors["password"] = "Password must not be empty"
    elif not is_utf8_encodable(password):
        errors["password"] = INVALID_CHARACTERS_MESSAGE.format("Password")

    return ValidationResult(errors)
