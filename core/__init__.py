"""
Core Framework for the Doctor App Use Cases.

This module provides the base classes and helpers that all use cases
build on. The layered architecture ensures:

1. Domain Layer - Pure business rules, no I/O
2. Data Layer - Repository pattern for data access
3. Presentation Layer - Display-ready view models

Each use case follows this pattern for consistency and reusability.
"""

from .domain import DomainError, DomainService, PreconditionViolation
from .data import ReadOnlyRepository
from .presentation import BadgeColor, TextFormatter, exhaustive_mapping

__all__ = [
    # Domain
    "DomainError",
    "DomainService",
    "PreconditionViolation",
    # Data
    "ReadOnlyRepository",
    # Presentation
    "BadgeColor",
    "TextFormatter",
    "exhaustive_mapping",
]
