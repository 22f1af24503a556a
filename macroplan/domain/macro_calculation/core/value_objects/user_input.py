"""UserInput value object - body metrics and goal for one calculation."""

from dataclasses import dataclass
from typing import Any, Type, TypeVar

from ..exceptions.domain_errors import InvalidUserInputError
from .gender import Gender
from .goal import Goal
from .units import HeightUnit, WeightUnit

_E = TypeVar("_E")


def _coerce_enum(enum_cls: Type[_E], raw: Any, field_name: str) -> _E:
    if isinstance(raw, enum_cls):
        return raw
    try:
        return enum_cls(raw)  # type: ignore[call-arg]
    except ValueError as e:
        allowed = ", ".join(m.value for m in enum_cls)  # type: ignore[attr-defined]
        raise InvalidUserInputError(
            f"{field_name} must be one of: {allowed}, got {raw!r}"
        ) from e


@dataclass(frozen=True)
class UserInput:
    """User body metrics as submitted, in the units the user chose.

    Immutable once created. Conversion to metric happens on read so that
    the record keeps exactly what was entered.

    Attributes:
        age: Age in years (13-120)
        gender: Biological sex
        weight: Body weight, positive, at most 700
        weight_unit: kg or lbs
        height: Height, positive, at most 300
        height_unit: cm or ft (decimal feet)
        goal: Nutritional goal
    """

    age: int
    gender: Gender
    weight: float
    weight_unit: WeightUnit
    height: float
    height_unit: HeightUnit
    goal: Goal

    def __post_init__(self) -> None:
        """Coerce enum fields from raw strings and validate bounds.

        Raises:
            InvalidUserInputError: If any constraint is violated
        """
        object.__setattr__(self, "gender", _coerce_enum(Gender, self.gender, "gender"))
        object.__setattr__(self, "goal", _coerce_enum(Goal, self.goal, "goal"))
        object.__setattr__(
            self, "weight_unit", _coerce_enum(WeightUnit, self.weight_unit, "weight_unit")
        )
        object.__setattr__(
            self, "height_unit", _coerce_enum(HeightUnit, self.height_unit, "height_unit")
        )

        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise InvalidUserInputError(f"Age must be an integer, got {self.age!r}")
        if not (13 <= self.age <= 120):
            raise InvalidUserInputError(f"Age must be 13-120 years, got {self.age}")

        if not (0 < self.weight <= 700):
            raise InvalidUserInputError(
                f"Weight must be positive and at most 700, got {self.weight}"
            )

        if not (0 < self.height <= 300):
            raise InvalidUserInputError(
                f"Height must be positive and at most 300, got {self.height}"
            )

    def weight_kg(self) -> float:
        """Body weight converted to kilograms."""
        return self.weight_unit.to_kg(self.weight)

    def height_cm(self) -> float:
        """Height converted to centimeters."""
        return self.height_unit.to_cm(self.height)
