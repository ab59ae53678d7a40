"""
Core services.

Services provide the public entry points of the matching engine over the
query ports.
"""

from skillmatcher.services.matching_service import MatchingService

__all__ = ["MatchingService"]
