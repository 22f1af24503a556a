"""GraphQL resolvers for macro calculation and administration."""

from .admin import AdminMutations, AdminQueries
from .calculator import CalculatorMutations, CalculatorQueries

__all__ = [
    "AdminMutations",
    "AdminQueries",
    "CalculatorMutations",
    "CalculatorQueries",
]
