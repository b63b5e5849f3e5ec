#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class MatchCandidate(BaseModel):
    """One ranked member with its score breakdown."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "member_id": "m-2",
                "member_name": "Lin",
                "total_score": 85,
                "breakdown": {
                    "skill_score": 40,
                    "skill_match": ["python", "design"],
                    "elemental_score": 15,
                    "workload_score": 30,
                    "current_load": 0
                }
            }
        }
    )

    member_id: str
    member_name: Optional[str] = None
    total_score: int = Field(ge=0, le=100)
    breakdown: Dict[str, Any] = Field(default_factory=dict)


class TaskInfo(BaseModel):
    task_id: str
    title: Optional[str] = None
    element: Optional[str] = None
    required_skills: List[str] = Field(default_factory=list)


class BestMatchResponse(BaseModel):
    """Ranked candidates for a task. best_match is null for an empty pool."""
    success: bool
    message: str
    no_candidates: bool = False
    best_match: Optional[MatchCandidate] = None
    all_candidates: List[MatchCandidate] = Field(default_factory=list)
    strategy_used: str
    task_info: TaskInfo


class AssignmentResponse(BaseModel):
    """Chosen assignee. The caller performs the actual assignment."""
    success: bool
    message: str
    task_id: str
    member_id: str
    auto_matched: bool
    rationale: Optional[MatchCandidate] = None


class ComplementEntry(BaseModel):
    member_id: str
    member_name: Optional[str] = None
    total_score: int = Field(ge=0, le=100)
    elemental_score: float = Field(ge=0, le=100)
    skill_score: float = Field(ge=0, le=100)
    reasons: List[str] = Field(default_factory=list)


class PartnersResponse(BaseModel):
    success: bool
    member_id: str
    count: int
    recommendations: List[ComplementEntry]


class TeamGapResponse(BaseModel):
    success: bool
    candidate_id: str
    team_size: int
    distribution: Dict[str, float]
    complement_score: float = Field(ge=0, le=100)


class ProjectRecommendationsResponse(BaseModel):
    success: bool
    count: int
    recommendations: List[ComplementEntry]
