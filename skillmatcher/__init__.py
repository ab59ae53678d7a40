"""
Skill Matcher Core Library.

Ranks candidates for a project (and projects for a user) by how well their
skill profiles, skill levels and availability fit the project's requirements.

Usage:
    # Engine (pure, no I/O)
    from skillmatcher.matching import score, rank, SkillRequirement, SkillProfileEntry

    # Facade over the database
    from skillmatcher.db import db
    from skillmatcher.services import MatchingService

    with db.session() as session:
        service = MatchingService.from_session(session)
        results = service.find_candidates_for_project(project_id, min_score=0.5, limit=10)

    # Config / logging
    from skillmatcher.config import get_settings
    from skillmatcher.logging import get_logger, configure_logging
"""

__version__ = "1.0.0"

# Import submodules directly to avoid circular imports:
#   from skillmatcher.db import db
#   from skillmatcher.config import get_settings
#   from skillmatcher.logging import get_logger
