"""
Pytest fixtures for Skill Matcher tests.

Provides an in-memory SQLite database for the SQL repositories and an
in-memory implementation of the matching query ports for facade tests.
"""

from datetime import date

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from skillmatcher.config import get_settings
from skillmatcher.db import Base
from skillmatcher.matching import (
    CandidateProfile,
    MembershipStatus,
    ProjectInfo,
    SkillPriority,
    SkillProfileEntry,
    SkillRequirement,
    UserInfo,
)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Isolate tests from a developer's .env and from each other's overrides."""
    monkeypatch.setenv("ENV", "test")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Database
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create a fresh in-memory database for each test."""
    import skillmatcher.models  # noqa: F401

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def test_session(test_engine):
    """Get a test session from the test database."""
    TestingSessionLocal = sessionmaker(bind=test_engine, autoflush=False, expire_on_commit=False)
    session = TestingSessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def _create_user(session, email, first_name="Test", last_name="User", is_enabled=True):
    """Helper to create a user."""
    from skillmatcher.models import User

    user = User(email=email, first_name=first_name, last_name=last_name, is_enabled=is_enabled)
    session.add(user)
    session.flush()
    return user


def _create_skill(session, name):
    from skillmatcher.models import Skill

    skill = Skill(name=name)
    session.add(skill)
    session.flush()
    return skill


def _create_project(
    session,
    owner,
    name="Test Project",
    status="PLANNED",
    start_date=date(2025, 1, 1),
    end_date=date(2025, 1, 31),
):
    """Helper to create a project owned by `owner`."""
    from skillmatcher.models import Project, ProjectStatus

    project = Project(
        name=name,
        description="Test",
        status=ProjectStatus(status),
        start_date=start_date,
        end_date=end_date,
        max_members=5,
        owner_id=owner.id,
    )
    session.add(project)
    session.flush()
    return project


@pytest.fixture
def seeded_db(test_session):
    """
    Seed a small but complete dataset.

    Project "Skill Matcher" (PLANNED, January 2025) requires
    kotlin 3 MUST_HAVE, spring 4 MUST_HAVE, docker 2 NICE_TO_HAVE.
    Users:
        alice: kotlin 4, spring 5, docker 3 (full match)
        bob: kotlin 3 (partial), available for half of January
        carol: kotlin 5, spring 5, active member (excluded)
        dave: kotlin 5, spring 5, left the project (included)
        erin: kotlin 5, disabled (excluded)
        frank: python 5 only (no overlap)
    """
    from skillmatcher.models import ProjectMember, ProjectSkill, UserAvailability, UserSkill

    session = test_session
    owner = _create_user(session, "pm@example.com", "PM", "User")
    skills = {name: _create_skill(session, name) for name in ("kotlin", "spring", "docker", "python")}

    project = _create_project(session, owner, name="Skill Matcher")
    for name, level, priority in (
        ("kotlin", 3, SkillPriority.MUST_HAVE),
        ("spring", 4, SkillPriority.MUST_HAVE),
        ("docker", 2, SkillPriority.NICE_TO_HAVE),
    ):
        session.add(
            ProjectSkill(
                project_id=project.id, skill_id=skills[name].id, level=level, priority=priority
            )
        )

    users = {
        "alice": _create_user(session, "alice@example.com", "Alice", "A"),
        "bob": _create_user(session, "bob@example.com", "Bob", "B"),
        "carol": _create_user(session, "carol@example.com", "Carol", "C"),
        "dave": _create_user(session, "dave@example.com", "Dave", "D"),
        "erin": _create_user(session, "erin@example.com", "Erin", "E", is_enabled=False),
        "frank": _create_user(session, "frank@example.com", "Frank", "F"),
    }
    held = {
        "alice": {"kotlin": 4, "spring": 5, "docker": 3},
        "bob": {"kotlin": 3},
        "carol": {"kotlin": 5, "spring": 5},
        "dave": {"kotlin": 5, "spring": 5},
        "erin": {"kotlin": 5},
        "frank": {"python": 5},
    }
    for user_name, levels in held.items():
        for skill_name, level in levels.items():
            session.add(
                UserSkill(user_id=users[user_name].id, skill_id=skills[skill_name].id, level=level)
            )

    session.add(
        UserAvailability(
            user_id=users["bob"].id,
            available_from=date(2025, 1, 1),
            available_to=date(2025, 1, 16),
        )
    )
    session.add(
        ProjectMember(project_id=project.id, user_id=users["carol"].id, status=MembershipStatus.ACTIVE)
    )
    session.add(
        ProjectMember(project_id=project.id, user_id=users["dave"].id, status=MembershipStatus.LEFT)
    )
    session.flush()

    return {"project": project, "owner": owner, "skills": skills, "users": users}


# =============================================================================
# In-memory query ports
# =============================================================================


class InMemoryQueries:
    """
    Implements ProjectQueries, ProfileQueries and AvailabilityQueries over dicts.

    Honours the port contract: users that are active members of a project,
    and projects a user is an active member of, are left out of the pools.
    Every call is recorded in `calls` as (method_name, args).
    """

    def __init__(self):
        self.projects: dict[str, ProjectInfo] = {}
        self.requirements: dict[str, list[SkillRequirement]] = {}
        self.users: dict[str, UserInfo] = {}
        self.profiles: dict[str, list[SkillProfileEntry]] = {}
        self.windows: dict = {}
        self.active_members: set[tuple[str, str]] = set()
        self.calls: list[tuple[str, tuple]] = []

    def _record(self, name, *args):
        self.calls.append((name, args))

    def called(self, name) -> bool:
        return any(call_name == name for call_name, _ in self.calls)

    # Seeding -----------------------------------------------------------------

    def add_project(self, project_id, requirements, name=None, start=date(2025, 1, 1), end=date(2025, 1, 31)):
        self.projects[project_id] = ProjectInfo(
            id=project_id,
            name=name or f"Project {project_id}",
            description=f"Description of {project_id}",
            status="PLANNED",
            start_date=start,
            end_date=end,
            owner_name="PM User",
        )
        self.requirements[project_id] = list(requirements)

    def add_user(self, user_id, skills, windows=None, name=None):
        self.users[user_id] = UserInfo(id=user_id, name=name or user_id.title(), email=f"{user_id}@example.com")
        self.profiles[user_id] = list(skills)
        if windows:
            self.windows[user_id] = list(windows)

    # ProjectQueries ----------------------------------------------------------

    def get_project_by_id(self, project_id):
        self._record("get_project_by_id", project_id)
        return self.projects.get(project_id)

    def get_skill_requirements(self, project_id):
        self._record("get_skill_requirements", project_id)
        return list(self.requirements.get(project_id, []))

    def get_skill_requirements_batch(self, project_ids):
        self._record("get_skill_requirements_batch", tuple(project_ids))
        return {pid: list(self.requirements[pid]) for pid in project_ids if self.requirements.get(pid)}

    def get_matchable_projects(self, user_id, held_skill_ids, exclude_status=MembershipStatus.ACTIVE):
        self._record("get_matchable_projects", user_id, tuple(held_skill_ids), exclude_status)
        held = set(held_skill_ids)
        return [
            project
            for pid, project in self.projects.items()
            if (pid, user_id) not in self.active_members
            and (
                not self.requirements.get(pid)
                or any(r.skill_id in held for r in self.requirements[pid])
            )
        ]

    # ProfileQueries ----------------------------------------------------------

    def get_user_by_id(self, user_id):
        self._record("get_user_by_id", user_id)
        return self.users.get(user_id)

    def get_skill_profile(self, user_id):
        self._record("get_skill_profile", user_id)
        return list(self.profiles.get(user_id, []))

    def get_matchable_profiles(self, required_skill_ids, project_id, exclude_status=MembershipStatus.ACTIVE):
        self._record("get_matchable_profiles", tuple(required_skill_ids), project_id, exclude_status)
        required = set(required_skill_ids)
        pool = []
        for user_id, entries in self.profiles.items():
            if (project_id, user_id) in self.active_members:
                continue
            overlap = [e for e in entries if e.skill_id in required]
            if overlap:
                pool.append(CandidateProfile(user=self.users[user_id], skills=overlap))
        return pool

    # AvailabilityQueries -----------------------------------------------------

    def get_availability_windows(self, user_id):
        self._record("get_availability_windows", user_id)
        return list(self.windows.get(user_id, []))

    def get_availability_windows_batch(self, user_ids):
        self._record("get_availability_windows_batch", tuple(user_ids))
        return {uid: list(self.windows[uid]) for uid in user_ids if uid in self.windows}


@pytest.fixture
def queries():
    """Empty in-memory query ports."""
    return InMemoryQueries()


@pytest.fixture
def kotlin_project_requirements():
    """kotlin 3 MUST_HAVE, spring 4 MUST_HAVE, docker 2 NICE_TO_HAVE."""
    return [
        SkillRequirement(skill_id="kotlin", skill_name="kotlin", required_level=3),
        SkillRequirement(skill_id="spring", skill_name="spring", required_level=4),
        SkillRequirement(
            skill_id="docker",
            skill_name="docker",
            required_level=2,
            priority=SkillPriority.NICE_TO_HAVE,
        ),
    ]
