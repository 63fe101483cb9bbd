"""
Application Layer - Use cases and business workflows.

This layer orchestrates domain entities and coordinates application logic.
It depends on domain layer and defines interfaces for infrastructure.
"""

from .result import Result

__all__ = ["Result"]
