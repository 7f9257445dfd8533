"""Error kinds raised by the recommendation engine."""


class CareerEngineError(Exception):
    """Base class for engine errors."""


class NotFoundError(CareerEngineError):
    """An entity the caller asked for does not exist."""

    kind: str = "entity"

    def __init__(self, identifier: int) -> None:
        self.identifier = identifier
        super().__init__(f"{self.kind.capitalize()} with ID {identifier} not found")


class EmployeeNotFoundError(NotFoundError):
    kind = "employee"


class RecommendationNotFoundError(NotFoundError):
    kind = "recommendation"


class ReasoningUnavailableError(CareerEngineError):
    """The reasoning generator could not produce text for a candidate."""
