#!/usr/bin/env python3
"""
Match service - translates API snapshots into engine calls and back.
"""

import logging
from typing import List

from core.matching import (
    MatchingService,
    MemberProfile,
    TaskDescriptor,
    ElementalProfile,
    MemberMatch,
    ComplementResult,
    MemberNotFoundError,
    NoEligibleMemberError,
    InvalidStrategyError,
)
from ..models.requests import (
    MemberSnapshot,
    TaskSnapshot,
    BestMatchRequest,
    AssignRequest,
    PartnersRequest,
    TeamGapRequest,
    ProjectRecommendationRequest,
)
from ..models.responses import (
    MatchCandidate,
    TaskInfo,
    BestMatchResponse,
    AssignmentResponse,
    ComplementEntry,
    PartnersResponse,
    TeamGapResponse,
    ProjectRecommendationsResponse,
)
from ..exceptions import (
    MemberNotFoundException,
    NoEligibleMemberException,
    InvalidStrategyException,
)

logger = logging.getLogger(__name__)


def to_member(snapshot: MemberSnapshot) -> MemberProfile:
    return MemberProfile(
        member_id=snapshot.member_id,
        name=snapshot.name,
        skills=list(snapshot.skills),
        elemental=ElementalProfile.from_dict(snapshot.elemental),
        active_task_count=snapshot.active_task_count,
    )


def to_task(snapshot: TaskSnapshot) -> TaskDescriptor:
    return TaskDescriptor.from_legacy(
        task_id=snapshot.task_id,
        required_skills=snapshot.required_skills,
        element=snapshot.element,
        requirement=snapshot.requirement,
        status=snapshot.status,
        assigned_to=snapshot.assigned_to,
        title=snapshot.title,
    )


def to_candidate(match: MemberMatch) -> MatchCandidate:
    return MatchCandidate(
        member_id=match.member_id,
        member_name=match.member_name,
        total_score=match.total_score,
        breakdown=match.breakdown.to_dict(),
    )


def to_complement_entry(result: ComplementResult) -> ComplementEntry:
    return ComplementEntry(
        member_id=result.member_id,
        member_name=result.member_name,
        total_score=result.total_score,
        elemental_score=round(result.elemental_score, 2),
        skill_score=round(result.skill_score, 2),
        reasons=result.reasons,
    )


class MatchService:
    """Service for matching endpoints."""

    def __init__(self, engine: MatchingService):
        self.engine = engine

    def find_best_match(self, request: BestMatchRequest) -> BestMatchResponse:
        task = to_task(request.task)
        members = [to_member(m) for m in request.members]

        try:
            outcome = self.engine.find_best_match(task, members, request.strategy)
        except InvalidStrategyError as e:
            raise InvalidStrategyException(str(e)) from e

        task_info = TaskInfo(
            task_id=task.task_id,
            title=task.title,
            element=task.dominant_element,
            required_skills=task.required_skills,
        )

        if outcome.no_candidates:
            return BestMatchResponse(
                success=True,
                message="No members available, register members first",
                no_candidates=True,
                strategy_used=outcome.strategy,
                task_info=task_info,
            )

        candidates = [to_candidate(m) for m in outcome.matches]
        best = candidates[0]
        return BestMatchResponse(
            success=True,
            message=f"Best match: {best.member_name} ({best.total_score} points)",
            best_match=best,
            all_candidates=candidates,
            strategy_used=outcome.strategy,
            task_info=task_info,
        )

    def assign(self, request: AssignRequest) -> AssignmentResponse:
        task = to_task(request.task)
        members = [to_member(m) for m in request.members]

        try:
            decision = self.engine.auto_assign(task, members, request.member_id)
        except MemberNotFoundError as e:
            raise MemberNotFoundException(str(e)) from e
        except NoEligibleMemberError as e:
            raise NoEligibleMemberException(str(e)) from e

        how = "auto-matched" if decision.auto_matched else "assigned"
        return AssignmentResponse(
            success=True,
            message=f"Task {decision.task_id} {how} to {decision.member_id}",
            task_id=decision.task_id,
            member_id=decision.member_id,
            auto_matched=decision.auto_matched,
            rationale=to_candidate(decision.rationale) if decision.rationale else None,
        )

    def recommend_partners(self, request: PartnersRequest) -> PartnersResponse:
        focal = to_member(request.member)
        pool = [to_member(m) for m in request.pool]
        results = self.engine.recommend_partners(focal, pool, request.top_n)
        entries = [to_complement_entry(r) for r in results]
        return PartnersResponse(
            success=True,
            member_id=focal.member_id,
            count=len(entries),
            recommendations=entries,
        )

    def team_gap(self, request: TeamGapRequest) -> TeamGapResponse:
        team = [to_member(m) for m in request.team]
        candidate = to_member(request.candidate)
        result = self.engine.team_gap(team, candidate)
        return TeamGapResponse(
            success=True,
            candidate_id=candidate.member_id,
            team_size=len(team),
            distribution=result['distribution'],
            complement_score=result['complement_score'],
        )

    def recommend_for_project(self, request: ProjectRecommendationRequest) -> ProjectRecommendationsResponse:
        candidates: List[MemberProfile] = [to_member(m) for m in request.candidates]
        results = self.engine.recommend_for_project(
            request.element,
            candidates,
            exclude_ids=request.existing_member_ids,
            limit=request.limit,
        )
        entries = [to_complement_entry(r) for r in results]
        return ProjectRecommendationsResponse(success=True, count=len(entries), recommendations=entries)
