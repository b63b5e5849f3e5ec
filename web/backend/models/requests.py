#!/usr/bin/env python3
"""
Request models for API endpoints.

Every request carries the member/task snapshots to score; the API never
reads storage on its own.
"""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from core.matching import TaskStatus


class MemberSnapshot(BaseModel):
    """A member profile as supplied by the caller."""
    member_id: str = Field(..., min_length=1)
    name: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    elemental: Dict[str, float] = Field(
        default_factory=dict,
        description="Attribute values keyed by fire, metal, wood, water, earth (0-100)"
    )
    active_task_count: int = Field(default=0, description="Active, non-completed tasks")


class TaskSnapshot(BaseModel):
    """A task as supplied by the caller."""
    task_id: str = Field(..., min_length=1)
    title: Optional[str] = None
    required_skills: List[str] = Field(default_factory=list)
    element: Optional[str] = Field(
        None,
        description="Single dominant attribute (legacy form), e.g. fire or 火"
    )
    requirement: Optional[Dict[str, float]] = Field(
        None,
        description="Full five-attribute weight vector; overrides element"
    )
    status: TaskStatus = TaskStatus.PENDING
    assigned_to: Optional[str] = None


class BestMatchRequest(BaseModel):
    """Request to rank members for a task."""
    task: TaskSnapshot
    members: List[MemberSnapshot] = Field(default_factory=list)
    strategy: Optional[str] = Field(
        None,
        description="skill, elemental, workload or hybrid (default)"
    )


class AssignRequest(BaseModel):
    """Request to pick an assignee. Without member_id the best hybrid match wins."""
    task: TaskSnapshot
    members: List[MemberSnapshot] = Field(default_factory=list)
    member_id: Optional[str] = None


class PartnersRequest(BaseModel):
    """Request for complementary partners of one member."""
    member: MemberSnapshot
    pool: List[MemberSnapshot] = Field(default_factory=list)
    top_n: Optional[int] = Field(None, ge=1, le=100)


class TeamGapRequest(BaseModel):
    """Request to score a candidate against the team's elemental gaps."""
    team: List[MemberSnapshot] = Field(default_factory=list)
    candidate: MemberSnapshot


class ProjectRecommendationRequest(BaseModel):
    """Request to rank candidates for a project of a given element."""
    element: Optional[str] = None
    candidates: List[MemberSnapshot] = Field(default_factory=list)
    existing_member_ids: List[str] = Field(default_factory=list)
    limit: int = Field(default=10, ge=1, le=100)
