#!/usr/bin/env python3
"""
Team-level scoring - how a candidate fits an existing team or a project.

- team_distribution / team_gap_complement: used when screening applicants,
  rewards candidates who are strong where the team is weak.
- project_fit / recommend_for_project: ranks members for a project that has
  a single elemental type.
"""

from typing import Dict, Iterable, List, Optional, Sequence
import logging

from core.matching.elements import ELEMENTS, generates, element_label, parse_element
from core.matching.models import ElementalProfile, MemberProfile, ComplementResult
from core.matching.utils import round_score, stable_rank

logger = logging.getLogger(__name__)

GAP_STRONG_CANDIDATE = 60.0
GAP_WEAK_TEAM = 50.0
GAP_STRONG_POINTS = 8
GAP_ABOVE_AVERAGE_POINTS = 3

PROJECT_GENERATES_SCORE = 95.0      # candidate's element feeds the project's
PROJECT_GENERATED_BY_SCORE = 90.0   # project's element feeds the candidate's
PROJECT_SAME_ELEMENT_SCORE = 85.0
PROJECT_OTHER_CAP = 80.0
PROJECT_MENTION_THRESHOLD = 60.0

# Elemental vs skill weighting, in tenths
PROJECT_ELEMENTAL_SHARE = 7
PROJECT_SKILL_SHARE = 3


def team_distribution(profiles: Iterable[ElementalProfile]) -> ElementalProfile:
    """Per-element mean over the team. An empty team is all zeros."""
    profiles = list(profiles)
    if not profiles:
        return ElementalProfile()
    sums = {e: 0.0 for e in ELEMENTS}
    for profile in profiles:
        for element in ELEMENTS:
            sums[element] += profile.get(element)
    return ElementalProfile(**{e: sums[e] / len(profiles) for e in ELEMENTS})


def team_gap_complement(candidate: ElementalProfile, distribution: ElementalProfile) -> float:
    """
    Weight the team's weakest element 5, the next 4 and so on down to 1.

    A strong candidate (> 60) in an element the team lacks (< 50) earns
    weight * 8; merely beating the team average earns weight * 3.
    Capped at 100.
    """
    ordered = sorted(ELEMENTS, key=distribution.get)
    score = 0.0
    for index, element in enumerate(ordered):
        weight = len(ELEMENTS) - index
        average = distribution.get(element)
        value = candidate.get(element)
        if average < GAP_WEAK_TEAM and value > GAP_STRONG_CANDIDATE:
            score += weight * GAP_STRONG_POINTS
        elif value > average:
            score += weight * GAP_ABOVE_AVERAGE_POINTS
    return min(score, 100.0)


def _skill_breadth(skills: Sequence[str]) -> tuple:
    count = len(skills)
    if count >= 5:
        return 85.0, f"Broad skill set: {count} skills"
    if count >= 3:
        return 75.0, f"Solid skill set: {count} skills"
    if count > 0:
        return 70.0, None
    return 0.0, None


def project_fit(project_element: Optional[str], candidate: MemberProfile) -> ComplementResult:
    reasons: List[str] = []
    elemental = 0.0

    project = parse_element(project_element) if project_element else None
    main = candidate.elemental.dominant()

    if project and main:
        if generates(main) == project:
            elemental = PROJECT_GENERATES_SCORE
            reasons.append(
                f"Strong {main} ({element_label(main)}) feeds the project's "
                f"{project} ({element_label(project)})"
            )
        elif generates(project) == main:
            elemental = PROJECT_GENERATED_BY_SCORE
            reasons.append(
                f"The project's {project} ({element_label(project)}) feeds "
                f"{main} ({element_label(main)})"
            )
        elif main == project:
            elemental = PROJECT_SAME_ELEMENT_SCORE
            reasons.append(f"Shares the project's {project} ({element_label(project)}) element")
        else:
            value = candidate.elemental.get(project)
            elemental = min(value, PROJECT_OTHER_CAP)
            if value >= PROJECT_MENTION_THRESHOLD:
                reasons.append(f"{project} ({element_label(project)}) strength {value:g} fits the project")

    skill, skill_reason = _skill_breadth(candidate.skills)
    if skill_reason:
        reasons.append(skill_reason)

    return ComplementResult(
        member_id=candidate.member_id,
        member_name=candidate.display_name,
        total_score=round_score((elemental * PROJECT_ELEMENTAL_SHARE + skill * PROJECT_SKILL_SHARE) / 10),
        elemental_score=elemental,
        skill_score=skill,
        reasons=reasons
    )


def recommend_for_project(
    project_element: Optional[str],
    candidates: Sequence[MemberProfile],
    exclude_ids: Iterable[str] = (),
    limit: int = 10
) -> List[ComplementResult]:
    excluded = set(exclude_ids)
    results = [project_fit(project_element, c) for c in candidates if c.member_id not in excluded]
    ranked = stable_rank(results, key=lambda r: r.total_score)
    logger.debug(f"Project recommendations: {len(results)} scored, {len(excluded)} excluded")
    return ranked[:max(0, limit)]


def summarize_distribution(distribution: ElementalProfile) -> Dict[str, float]:
    return {e: round(distribution.get(e), 2) for e in ELEMENTS}
