#!/usr/bin/env python3
"""
Matching Service - entry point used by the API layer.

Wraps the pure scoring functions with configuration and logging. Every call
works on the snapshots it is given and keeps no state between calls, so one
instance can be shared by concurrent requests.
"""

from typing import List, Optional, Sequence, Dict, Any
import logging

from core.config_loader import MatchingConfig, ComplementConfig
from core.matching.models import (
    MemberProfile,
    TaskDescriptor,
    MatchOutcome,
    AssignmentDecision,
    ComplementResult,
)
from core.matching import task_match, assignment, complement, team

logger = logging.getLogger(__name__)


class MatchingService:
    """Task/member matching, auto-assignment and partner recommendations."""

    def __init__(
        self,
        matching_config: Optional[MatchingConfig] = None,
        complement_config: Optional[ComplementConfig] = None
    ):
        self.matching_config = matching_config or MatchingConfig()
        self.complement_config = complement_config or ComplementConfig()

    def find_best_match(
        self,
        task: TaskDescriptor,
        members: Sequence[MemberProfile],
        strategy: Optional[str] = None
    ) -> MatchOutcome:
        outcome = task_match.rank_members(task, members, strategy, self.matching_config)
        if outcome.no_candidates:
            logger.warning(f"No candidate members for task {task.task_id}")
            return outcome

        best = outcome.best
        logger.info(
            f"Best match for task {task.task_id}: {best.member_id} "
            f"({best.total_score} pts, strategy={outcome.strategy}, pool={len(members)})"
        )
        return outcome

    def auto_assign(
        self,
        task: TaskDescriptor,
        members: Sequence[MemberProfile],
        member_id: Optional[str] = None
    ) -> AssignmentDecision:
        if not task.is_eligible:
            # Scoring still runs; filtering terminal tasks is up to the caller
            logger.warning(
                f"Task {task.task_id} is {task.status.value}"
                f"{' and already assigned' if task.assigned_to else ''}"
            )
        return assignment.decide_assignment(task, members, member_id, self.matching_config)

    def recommend_partners(
        self,
        focal: MemberProfile,
        pool: Sequence[MemberProfile],
        top_n: Optional[int] = None
    ) -> List[ComplementResult]:
        results = complement.recommend_partners(focal, pool, top_n, self.complement_config)
        logger.info(f"Recommended {len(results)} partners for {focal.member_id} from pool of {len(pool)}")
        return results

    def team_gap(self, team_members: Sequence[MemberProfile], candidate: MemberProfile) -> Dict[str, Any]:
        distribution = team.team_distribution(m.elemental for m in team_members)
        score = team.team_gap_complement(candidate.elemental, distribution)
        logger.info(f"Team gap score for {candidate.member_id}: {score:.0f} (team size {len(team_members)})")
        return {
            'distribution': team.summarize_distribution(distribution),
            'complement_score': score,
        }

    def recommend_for_project(
        self,
        project_element: Optional[str],
        candidates: Sequence[MemberProfile],
        exclude_ids: Sequence[str] = (),
        limit: int = 10
    ) -> List[ComplementResult]:
        results = team.recommend_for_project(project_element, candidates, exclude_ids, limit)
        logger.info(f"Project recommendations ({project_element}): {len(results)} returned")
        return results
