"""Pydantic models for roll parameter validation.

Callers check a ``ValidationResult`` before rolling instead of catching
exceptions, so validation never performs a roll and never raises.
"""

from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from .roll import DieType, RollMode


class ValidationResult(BaseModel):
    """Outcome of a parameter check."""

    valid: bool
    error: str | None = None


class RollRequest(BaseModel):
    """Parameters for a single dice roll.

    Fields are validated in declaration order, so the first reported error
    names the first constraint that failed.
    """

    die_type: DieType
    mode: RollMode = RollMode.NORMAL
    modifiers: list[int] = Field(default_factory=list)

    @field_validator("die_type", mode="before")
    @classmethod
    def known_die_type(cls, v: Any) -> DieType:
        """Reject anything that is not a supported die."""
        try:
            return DieType(v)
        except ValueError:
            raise PydanticCustomError("die_type", "Invalid die type") from None

    @field_validator("mode", mode="before")
    @classmethod
    def known_mode(cls, v: Any) -> RollMode:
        """Reject anything that is not a supported roll mode."""
        try:
            return RollMode(v)
        except ValueError:
            raise PydanticCustomError("roll_mode", "Invalid roll mode") from None

    @field_validator("modifiers", mode="before")
    @classmethod
    def integer_modifiers(cls, v: Any) -> list[int]:
        """Require a list (or tuple) of plain integers; bools and floats are refused."""
        if not isinstance(v, (list, tuple)):
            raise PydanticCustomError("modifiers_type", "Modifiers must be a list")
        if any(isinstance(mod, bool) or not isinstance(mod, int) for mod in v):
            raise PydanticCustomError("modifier_value", "All modifiers must be integers")
        return list(v)


def validate_roll_request(die_type: Any, mode: Any, modifiers: Any) -> ValidationResult:
    """Check roll parameters without rolling.

    Args:
        die_type: Die type value or string ("d20", "d6")
        mode: Roll mode value or string
        modifiers: List of integer modifiers

    Returns:
        ValidationResult with ``valid`` set and the first failure message
    """
    try:
        RollRequest(die_type=die_type, mode=mode, modifiers=modifiers)
    except ValidationError as exc:
        return ValidationResult(valid=False, error=exc.errors()[0]["msg"])
    return ValidationResult(valid=True)
