#!/usr/bin/env python3
"""
Task-Member Match Scorer - rank candidate members against one task.

Strategies enable scoring components:
- skill:     skill overlap only (40 points)
- elemental: elemental affinity only (30 points)
- workload:  current workload only (30 points)
- hybrid:    all three (100 points)

Disabled components contribute nothing and the remaining ones are NOT
re-normalized, so each single-signal strategy has a lower maximum.
"""

from typing import Optional, Sequence, Tuple, List
import logging

from core.config_loader import MatchingConfig
from core.matching.elements import ELEMENTS
from core.matching.exceptions import InvalidStrategyError
from core.matching.models import (
    MemberProfile,
    TaskDescriptor,
    ComponentScores,
    MemberMatch,
    MatchOutcome,
)
from core.matching.utils import clamp, round_score, skills_match, stable_rank

logger = logging.getLogger(__name__)

SKILL = "skill"
ELEMENTAL = "elemental"
WORKLOAD = "workload"
HYBRID = "hybrid"

STRATEGY_COMPONENTS = {
    SKILL: (SKILL,),
    ELEMENTAL: (ELEMENTAL,),
    WORKLOAD: (WORKLOAD,),
    HYBRID: (SKILL, ELEMENTAL, WORKLOAD),
}

# Names accepted from older tool-call clients
STRATEGY_ALIASES = {
    "wuxing": ELEMENTAL,
    "load": WORKLOAD,
}


def resolve_strategy(strategy: Optional[str], default: str = HYBRID) -> str:
    """Canonical strategy name; None or empty selects the default."""
    if not strategy:
        return default
    key = strategy.strip().lower()
    key = STRATEGY_ALIASES.get(key, key)
    if key not in STRATEGY_COMPONENTS:
        raise InvalidStrategyError(
            f"Unknown strategy '{strategy}', expected one of {sorted(STRATEGY_COMPONENTS)}"
        )
    return key


def calculate_skill_score(
    required_skills: Sequence[str],
    member_skills: Sequence[str],
    config: MatchingConfig
) -> Tuple[float, List[str]]:
    """
    Skill overlap score.

    A required skill counts as matched when any member skill matches it
    (see utils.skills_match). A task without requirements gets the neutral
    half-weight score rather than a free pass.

    Returns:
        Tuple of (raw_score, matched_required_skills)
    """
    if not required_skills:
        return config.skill_neutral_score, []

    matched = [
        required for required in required_skills
        if any(skills_match(required, owned, config.skill_match_mode) for owned in member_skills)
    ]
    score = len(matched) / len(required_skills) * config.skill_weight
    return score, matched


def calculate_elemental_score(
    task: TaskDescriptor,
    member: MemberProfile,
    config: MatchingConfig
) -> Tuple[float, Optional[float]]:
    """
    Elemental affinity score.

    The member's strength is the requirement-weighted mean of their
    attributes; for a one-hot (legacy single-attribute) requirement this is
    simply the member's value for that attribute. Strength is scaled from
    [0, 100] to the elemental point budget.

    A task with no requirement, or a member with nothing in the required
    attributes, gets the neutral half-weight score.

    Returns:
        Tuple of (raw_score, member_strength or None when neutral)
    """
    weights = task.requirement
    total_weight = weights.total()
    if total_weight <= 0:
        return config.elemental_neutral_score, None

    strength = sum(weights.get(e) * member.elemental.get(e) for e in ELEMENTS) / total_weight
    if strength <= 0:
        return config.elemental_neutral_score, None

    return strength * config.elemental_weight / 100.0, strength


def calculate_workload_score(active_task_count: int, config: MatchingConfig) -> float:
    """Each active task costs workload_cost_per_task points, floored at 0."""
    return max(0.0, config.workload_weight - config.workload_cost_per_task * active_task_count)


def score_member(
    task: TaskDescriptor,
    member: MemberProfile,
    strategy: str,
    config: MatchingConfig
) -> MemberMatch:
    """
    Score a single member. The total rounds the sum of the raw enabled
    components; breakdown values are rounded individually for display.
    """
    components = STRATEGY_COMPONENTS[strategy]
    breakdown = ComponentScores()

    if SKILL in components:
        raw, matched = calculate_skill_score(task.required_skills, member.skills, config)
        breakdown.skill_raw = raw
        breakdown.skill = round_score(clamp(raw))
        breakdown.matched_skills = matched

    if ELEMENTAL in components:
        raw, strength = calculate_elemental_score(task, member, config)
        breakdown.elemental_raw = raw
        breakdown.elemental = round_score(clamp(raw))
        breakdown.elemental_strength = strength

    if WORKLOAD in components:
        raw = calculate_workload_score(member.active_task_count, config)
        breakdown.workload_raw = raw
        breakdown.workload = round_score(clamp(raw))
        breakdown.current_load = member.active_task_count

    total = round_score(clamp(breakdown.raw_total()))

    return MemberMatch(
        member_id=member.member_id,
        member_name=member.display_name,
        total_score=total,
        breakdown=breakdown
    )


def rank_members(
    task: TaskDescriptor,
    members: Sequence[MemberProfile],
    strategy: Optional[str] = None,
    config: Optional[MatchingConfig] = None
) -> MatchOutcome:
    """
    Rank candidate members for a task.

    Task status is not checked; filtering terminal tasks is the caller's job.

    Args:
        task: Task snapshot
        members: Candidate snapshots, in the order used for tie-breaking
        strategy: skill, elemental, workload or hybrid (aliases wuxing/load)
        config: Weights and neutral values

    Returns:
        MatchOutcome sorted by total score descending, earlier members winning
        ties. An empty pool yields no_candidates=True and no matches.
    """
    cfg = config or MatchingConfig()
    resolved = resolve_strategy(strategy, cfg.default_strategy)

    if not members:
        return MatchOutcome(task_id=task.task_id, strategy=resolved, no_candidates=True)

    scored = [score_member(task, member, resolved, cfg) for member in members]
    ranked = stable_rank(scored, key=lambda m: m.total_score)

    logger.debug(
        f"Ranked {len(ranked)} members for task {task.task_id} "
        f"(strategy={resolved}, best={ranked[0].member_id}:{ranked[0].total_score})"
    )

    return MatchOutcome(task_id=task.task_id, strategy=resolved, matches=ranked)
