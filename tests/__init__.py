#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Run only the engine tests
    python -m pytest tests/unit/core -v

    # Using unittest
    python -m unittest discover tests -v

Snapshot builders below keep individual tests short.
"""

from typing import Dict, List, Optional

from core.matching import ElementalProfile, MemberProfile, TaskDescriptor


def make_member(
    member_id: str,
    skills: Optional[List[str]] = None,
    elemental: Optional[Dict[str, float]] = None,
    active_task_count: int = 0,
    name: Optional[str] = None
) -> MemberProfile:
    """Build a member snapshot from loose values."""
    return MemberProfile(
        member_id=member_id,
        skills=list(skills or []),
        elemental=ElementalProfile.from_dict(elemental or {}),
        active_task_count=active_task_count,
        name=name,
    )


def make_task(
    task_id: str = "t-1",
    required_skills: Optional[List[str]] = None,
    element: Optional[str] = None,
    requirement: Optional[Dict[str, float]] = None,
    **kwargs
) -> TaskDescriptor:
    """Build a task snapshot, normalizing the legacy single-element form."""
    return TaskDescriptor.from_legacy(
        task_id=task_id,
        required_skills=required_skills,
        element=element,
        requirement=requirement,
        **kwargs
    )
