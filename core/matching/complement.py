#!/usr/bin/env python3
"""
Member-Member Complement Scorer - how well two members offset each other.

Elemental term:
- A strong generating attribute in one member (> strong_threshold) feeding an
  attribute the other member is weak in (< weak_threshold) adds
  generator * (100 - receiver) / 100 * generative_factor. Both directions count.
- Mutually dominant attributes (> conflict_threshold) related by the
  destructive cycle subtract conflict_penalty, once per overcoming element
  whichever member holds it.
- Clamped to [0, 100].

Skill term:
- coverage = |A ∪ B| / (|A| + |B|) * 100, neutral when both are empty
- more than overlap_limit shared skills subtracts overlap_penalty
- Clamped to [0, 100].

Total = elemental * elemental_weight + skill * skill_weight, rounded.
The score is symmetric: complement_score(a, b) == complement_score(b, a).
"""

from typing import List, Optional, Sequence, Tuple
import logging

from core.config_loader import ComplementConfig
from core.matching.elements import ELEMENTS, generates, overcomes, element_label
from core.matching.models import ElementalProfile, MemberProfile, ComplementResult
from core.matching.utils import clamp, round_score, skill_set, stable_rank

logger = logging.getLogger(__name__)


def generative_contributions(
    giver: ElementalProfile,
    receiver: ElementalProfile,
    config: ComplementConfig
) -> List[Tuple[str, str, float]]:
    """
    Directed compensation of `receiver` by `giver` along the generative cycle.

    Returns:
        List of (source_element, generated_element, points) in canonical order
    """
    contributions = []
    for element in ELEMENTS:
        target = generates(element)
        strength = giver.get(element)
        weakness = receiver.get(target)
        if strength > config.strong_threshold and weakness < config.weak_threshold:
            points = (strength * (100.0 - weakness) / 100.0) * config.generative_factor
            contributions.append((element, target, points))
    return contributions


def conflict_count(a: ElementalProfile, b: ElementalProfile, config: ComplementConfig) -> int:
    """
    Number of destructive pairings where both sides are dominant.

    Each element is counted once, whichever member holds the overcoming side.
    """
    count = 0
    limit = config.conflict_threshold
    for element in ELEMENTS:
        victim = overcomes(element)
        if ((a.get(element) > limit and b.get(victim) > limit)
                or (b.get(element) > limit and a.get(victim) > limit)):
            count += 1
    return count


def elemental_complement(
    a: ElementalProfile,
    b: ElementalProfile,
    config: Optional[ComplementConfig] = None
) -> float:
    cfg = config or ComplementConfig()
    forward = sum(p for _, _, p in generative_contributions(a, b, cfg))
    backward = sum(p for _, _, p in generative_contributions(b, a, cfg))
    penalty = conflict_count(a, b, cfg) * cfg.conflict_penalty
    return clamp(forward + backward - penalty)


def skill_complement(
    a_skills: Sequence[str],
    b_skills: Sequence[str],
    config: Optional[ComplementConfig] = None
) -> float:
    cfg = config or ComplementConfig()
    left, right = skill_set(a_skills), skill_set(b_skills)
    combined = len(left) + len(right)
    if combined == 0:
        return cfg.neutral_skill_score

    coverage = len(left | right) / combined * 100.0
    if len(left & right) > cfg.overlap_limit:
        coverage -= cfg.overlap_penalty
    return clamp(coverage)


def _reason(giver: MemberProfile, receiver: MemberProfile, source: str, target: str) -> str:
    return (
        f"{giver.display_name}'s strong {source} ({element_label(source)}) "
        f"feeds {target} ({element_label(target)}), where {receiver.display_name} is weak"
    )


def complement_score(
    a: MemberProfile,
    b: MemberProfile,
    config: Optional[ComplementConfig] = None
) -> ComplementResult:
    """
    Score how well `b` complements `a`.

    Reasons start with the first A→B compensation and the first B→A one,
    then any others, capped at max_reasons. Conflict penalties never appear
    in the reasons.
    """
    cfg = config or ComplementConfig()

    elemental = elemental_complement(a.elemental, b.elemental, cfg)
    skill = skill_complement(a.skills, b.skills, cfg)
    total = round_score(clamp(elemental * cfg.elemental_weight + skill * cfg.skill_weight))

    forward = [
        _reason(a, b, source, target)
        for source, target, _ in generative_contributions(a.elemental, b.elemental, cfg)
    ]
    backward = [
        _reason(b, a, source, target)
        for source, target, _ in generative_contributions(b.elemental, a.elemental, cfg)
    ]
    reasons = forward[:1] + backward[:1] + forward[1:] + backward[1:]

    return ComplementResult(
        member_id=b.member_id,
        member_name=b.display_name,
        total_score=total,
        elemental_score=elemental,
        skill_score=skill,
        reasons=reasons[:cfg.max_reasons]
    )


def recommend_partners(
    focal: MemberProfile,
    pool: Sequence[MemberProfile],
    top_n: Optional[int] = None,
    config: Optional[ComplementConfig] = None
) -> List[ComplementResult]:
    """
    Rank `pool` by complementarity with `focal` and return the top N.

    The focal member is skipped if present in the pool; ties keep pool order.
    """
    cfg = config or ComplementConfig()
    limit = top_n if top_n is not None else cfg.default_top_n

    results = [
        complement_score(focal, other, cfg)
        for other in pool
        if other.member_id != focal.member_id
    ]
    ranked = stable_rank(results, key=lambda r: r.total_score)

    logger.debug(f"Scored {len(results)} partners for {focal.member_id}, returning top {limit}")
    return ranked[:max(0, limit)]
