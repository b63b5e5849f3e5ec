"""
Auto-Assignment Decision - pick exactly one member for a task.

An explicit member choice skips scoring entirely. Otherwise the hybrid
ranking decides and its breakdown is returned as the rationale. The engine
never mutates anything; the caller performs the assignment.
"""

from typing import Optional, Sequence
import logging

from core.config_loader import MatchingConfig
from core.matching.exceptions import MemberNotFoundError, NoEligibleMemberError
from core.matching.models import AssignmentDecision, MemberProfile, TaskDescriptor
from core.matching.task_match import HYBRID, rank_members

logger = logging.getLogger(__name__)


def decide_assignment(
    task: TaskDescriptor,
    members: Sequence[MemberProfile],
    member_id: Optional[str] = None,
    config: Optional[MatchingConfig] = None
) -> AssignmentDecision:
    if member_id:
        if not any(m.member_id == member_id for m in members):
            raise MemberNotFoundError(f"Member {member_id} not found")
        logger.info(f"Task {task.task_id}: explicit assignment to {member_id}")
        return AssignmentDecision(task_id=task.task_id, member_id=member_id, auto_matched=False)

    outcome = rank_members(task, members, strategy=HYBRID, config=config)
    if outcome.no_candidates:
        raise NoEligibleMemberError(f"No eligible member for task {task.task_id}")

    best = outcome.best
    logger.info(
        f"Task {task.task_id}: auto-matched {best.member_id} "
        f"with score {best.total_score} out of {len(outcome.matches)} candidates"
    )
    return AssignmentDecision(
        task_id=task.task_id,
        member_id=best.member_id,
        auto_matched=True,
        rationale=best,
        candidates=outcome.matches
    )
