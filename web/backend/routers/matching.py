#!/usr/bin/env python3
"""
Matching endpoints - best match, assignment and partner recommendations.
"""

import logging
from fastapi import APIRouter, Depends

from ..dependencies import get_match_service
from ..services.match_service import MatchService
from ..models.requests import (
    BestMatchRequest,
    AssignRequest,
    PartnersRequest,
    TeamGapRequest,
    ProjectRecommendationRequest,
)
from ..models.responses import (
    BestMatchResponse,
    AssignmentResponse,
    PartnersResponse,
    TeamGapResponse,
    ProjectRecommendationsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matching", tags=["matching"])


@router.post("/best-match", response_model=BestMatchResponse)
def find_best_match(
    request: BestMatchRequest,
    service: MatchService = Depends(get_match_service)
):
    """
    Rank the supplied members for a task.

    Strategies: skill, elemental, workload, hybrid (default).
    An empty member list returns best_match=null instead of an error.
    """
    return service.find_best_match(request)


@router.post("/assign", response_model=AssignmentResponse)
def assign_task(
    request: AssignRequest,
    service: MatchService = Depends(get_match_service)
):
    """
    Choose the assignee for a task.

    With member_id the member is used as-is (404 if not in the list);
    without it the best hybrid match is chosen (409 if there are no members).
    """
    return service.assign(request)


@router.post("/partners", response_model=PartnersResponse)
def recommend_partners(
    request: PartnersRequest,
    service: MatchService = Depends(get_match_service)
):
    """
    Rank the pool by how well each member complements the given member.
    """
    return service.recommend_partners(request)


@router.post("/team-gap", response_model=TeamGapResponse)
def team_gap(
    request: TeamGapRequest,
    service: MatchService = Depends(get_match_service)
):
    """
    Score how well a candidate fills the team's weakest elements.
    """
    return service.team_gap(request)


@router.post("/project-recommendations", response_model=ProjectRecommendationsResponse)
def project_recommendations(
    request: ProjectRecommendationRequest,
    service: MatchService = Depends(get_match_service)
):
    """
    Recommend candidates for a project, skipping existing project members.
    """
    return service.recommend_for_project(request)
