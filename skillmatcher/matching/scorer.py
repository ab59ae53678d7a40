"""
Match scorer: compare one requirement set against one skill profile.

Score components (each 0.0-1.0):
- must_have_coverage: share of MUST_HAVE skills held at or above the required level
- nice_to_have_coverage: share of NICE_TO_HAVE skills held at any level
- level_fit_score: mean of min(user_level / required_level, 1.0) over held skills
- availability_score: share of the target range covered by availability windows

The composite score is their weighted sum. The scorer is a pure function: no
I/O, no logging, and identical inputs always produce an identical result.
"""

import math
from collections.abc import Iterable

from skillmatcher.constants import LEVEL_FIT_CAP, SCORE_PRECISION

from .availability import availability_score
from .types import (
    AvailabilityWindow,
    DateRange,
    MatchedSkill,
    MatchResult,
    MissingSkill,
    ScoreBreakdown,
    ScoreWeights,
    SkillPriority,
    SkillProfileEntry,
    SkillRequirement,
)

DEFAULT_WEIGHTS = ScoreWeights()


def _index_profile(profile: Iterable[SkillProfileEntry]) -> dict[str, SkillProfileEntry]:
    """Index profile entries by skill id, keeping the highest level on duplicates."""
    index: dict[str, SkillProfileEntry] = {}
    for entry in profile:
        current = index.get(entry.skill_id)
        if current is None or entry.level > current.level:
            index[entry.skill_id] = entry
    return index


def _coverage(satisfied: int, total: int) -> float:
    # An empty tier is vacuously satisfied
    if total == 0:
        return 1.0
    return satisfied / total


def calculate_level_fit(matched: list[MatchedSkill]) -> float:
    """
    Mean capped level ratio over matched skills.

    Overqualification is not rewarded: level 5 against a required level 1
    counts as 1.0. Returns 0.0 when nothing is matched.
    """
    if not matched:
        return 0.0
    ratios = [min(m.user_level / m.required_level, LEVEL_FIT_CAP) for m in matched]
    # fsum keeps the result independent of input order
    return math.fsum(ratios) / len(ratios)


def score(
    requirements: list[SkillRequirement],
    profile: list[SkillProfileEntry],
    availability: list[AvailabilityWindow],
    target_range: DateRange,
    *,
    subject_id: str = "",
    subject_name: str = "",
    weights: ScoreWeights | None = None,
    precision: int = SCORE_PRECISION,
) -> MatchResult:
    """
    Score a skill profile against a requirement set.

    Args:
        requirements: Skills the project needs.
        profile: Skills the subject holds.
        availability: Availability windows of the candidate; empty means always available.
        target_range: Period the candidate must be available for.
        subject_id: Identifier of the scored subject, copied to the result.
        subject_name: Display name of the scored subject, copied to the result.
        weights: Composite score weights; defaults to the documented calibration.
        precision: Decimal places kept on the score and each breakdown component.

    Returns:
        MatchResult with matched/missing skills in requirement order.
    """
    weights = weights or DEFAULT_WEIGHTS
    held = _index_profile(profile)

    matched: list[MatchedSkill] = []
    missing: list[MissingSkill] = []
    must_total = must_met = 0
    nice_total = nice_held = 0

    for req in requirements:
        entry = held.get(req.skill_id)
        is_must = req.priority == SkillPriority.MUST_HAVE

        if is_must:
            must_total += 1
        else:
            nice_total += 1

        if entry is None:
            missing.append(
                MissingSkill(
                    skill_id=req.skill_id,
                    skill_name=req.skill_name,
                    required_level=req.required_level,
                    priority=req.priority,
                )
            )
            continue

        matched.append(
            MatchedSkill(
                skill_id=req.skill_id,
                skill_name=req.skill_name,
                user_level=entry.level,
                required_level=req.required_level,
                priority=req.priority,
            )
        )
        if is_must:
            # Presence without the required competency does not count
            if entry.level >= req.required_level:
                must_met += 1
        else:
            nice_held += 1

    must_have_coverage = _coverage(must_met, must_total)
    nice_to_have_coverage = _coverage(nice_held, nice_total)
    level_fit_score = calculate_level_fit(matched)
    availability = availability_score(availability, target_range)

    composite = (
        weights.must_have * must_have_coverage
        + weights.nice_to_have * nice_to_have_coverage
        + weights.level_fit * level_fit_score
        + weights.availability * availability
    )

    return MatchResult(
        subject_id=subject_id,
        subject_name=subject_name,
        score=round(min(max(composite, 0.0), 1.0), precision),
        breakdown=ScoreBreakdown(
            must_have_coverage=round(must_have_coverage, precision),
            nice_to_have_coverage=round(nice_to_have_coverage, precision),
            level_fit_score=round(level_fit_score, precision),
            availability_score=round(availability, precision),
        ),
        matched_skills=matched,
        missing_skills=missing,
    )


__all__ = ["score", "calculate_level_fit", "DEFAULT_WEIGHTS"]
