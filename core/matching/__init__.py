#!/usr/bin/env python3
"""
Matching Module - task/member matching engine.

Public API:
- MatchingService: Service orchestrator used by the API layer
- MemberProfile, TaskDescriptor, ElementalProfile: Input snapshots
- MatchOutcome, AssignmentDecision, ComplementResult: Results

Modules:
- models.py: Snapshots and result dataclasses
- elements.py: Elemental attributes, generative and destructive cycles
- utils.py: Clamping, rounding, skill comparison, stable ranking
- task_match.py: Task-Member Match Scorer (skill/elemental/workload/hybrid)
- assignment.py: Auto-assignment decision
- complement.py: Member-Member Complement Scorer
- team.py: Team gap and project recommendation scoring
- service.py: MatchingService orchestrator
"""

from core.matching.models import (
    ElementalProfile,
    MemberProfile,
    TaskDescriptor,
    TaskStatus,
    ComponentScores,
    MemberMatch,
    MatchOutcome,
    AssignmentDecision,
    ComplementResult,
)
from core.matching.exceptions import (
    MatchingError,
    EmptyCandidatePoolError,
    NoEligibleMemberError,
    MemberNotFoundError,
    InvalidStrategyError,
)
from core.matching.service import MatchingService

__all__ = [
    'MatchingService',
    'ElementalProfile',
    'MemberProfile',
    'TaskDescriptor',
    'TaskStatus',
    'ComponentScores',
    'MemberMatch',
    'MatchOutcome',
    'AssignmentDecision',
    'ComplementResult',
    'MatchingError',
    'EmptyCandidatePoolError',
    'NoEligibleMemberError',
    'MemberNotFoundError',
    'InvalidStrategyError',
]
