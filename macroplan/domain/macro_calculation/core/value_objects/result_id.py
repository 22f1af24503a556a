"""ResultId value object - identifier of a recorded calculation."""

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class ResultId:
    """Unique identifier for a recorded macro result."""

    value: UUID

    @staticmethod
    def generate() -> "ResultId":
        """Generate a new unique result ID."""
        return ResultId(value=uuid4())

    @staticmethod
    def from_string(id_str: str) -> "ResultId":
        """Create ResultId from string representation.

        Args:
            id_str: String representation of UUID

        Returns:
            ResultId: Parsed identifier

        Raises:
            ValueError: If string is not a valid UUID
        """
        try:
            return ResultId(value=UUID(id_str))
        except ValueError as e:
            raise ValueError(f"Invalid result ID format: {id_str}") from e

    def __str__(self) -> str:
        return str(self.value)
