#!/usr/bin/env python3
"""
Matching Models - Snapshot inputs and ephemeral results of the matching engine.

Inputs (MemberProfile, TaskDescriptor) are read-only snapshots supplied by the
caller. Results (MatchOutcome, AssignmentDecision, ComplementResult) are never
persisted by the engine.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import List, Dict, Any, Optional, Mapping

from core.matching.elements import ELEMENTS, parse_element


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    BLOCKED = "blocked"


def _to_score(value: Any) -> float:
    """Coerce a loose attribute value to a float in [0, 100]; junk becomes 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if number != number:  # NaN
        return 0.0
    return max(0.0, min(100.0, number))


@dataclass(frozen=True)
class ElementalProfile:
    """Five named elemental attributes, each in [0, 100]."""
    fire: float = 0.0
    metal: float = 0.0
    wood: float = 0.0
    water: float = 0.0
    earth: float = 0.0

    def __post_init__(self):
        for element in ELEMENTS:
            object.__setattr__(self, element, _to_score(getattr(self, element)))

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'ElementalProfile':
        """Build a profile from a loose mapping. Unknown keys are ignored."""
        values = {}
        for key, value in (data or {}).items():
            element = parse_element(key)
            if element:
                values[element] = value
        return cls(**values)

    @classmethod
    def one_hot(cls, element: str, strength: float = 100.0) -> 'ElementalProfile':
        return cls(**{element: strength})

    def get(self, element: str) -> float:
        return getattr(self, element)

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)

    def total(self) -> float:
        return sum(self.get(e) for e in ELEMENTS)

    def dominant(self) -> Optional[str]:
        """Highest attribute; canonical order breaks ties. None for an all-zero profile."""
        best = None
        for element in ELEMENTS:
            value = self.get(element)
            if value > 0 and (best is None or value > self.get(best)):
                best = element
        return best


@dataclass
class MemberProfile:
    """Snapshot of a member as seen by the engine."""
    member_id: str
    skills: List[str] = field(default_factory=list)
    elemental: ElementalProfile = field(default_factory=ElementalProfile)
    active_task_count: int = 0
    name: Optional[str] = None

    def __post_init__(self):
        self.skills = [s for s in (self.skills or []) if isinstance(s, str)]
        try:
            self.active_task_count = max(0, int(self.active_task_count or 0))
        except (TypeError, ValueError, OverflowError):
            self.active_task_count = 0

    @property
    def display_name(self) -> str:
        return self.name or self.member_id


@dataclass
class TaskDescriptor:
    """
    Snapshot of a task as seen by the engine.

    `requirement` is always a full five-attribute weight vector. Legacy tasks
    that carry a single dominant attribute are normalized to a one-hot vector
    by `from_legacy`.
    """
    task_id: str
    required_skills: List[str] = field(default_factory=list)
    requirement: ElementalProfile = field(default_factory=ElementalProfile)
    status: TaskStatus = TaskStatus.PENDING
    assigned_to: Optional[str] = None
    title: Optional[str] = None

    def __post_init__(self):
        self.required_skills = [s for s in (self.required_skills or []) if isinstance(s, str)]
        if not isinstance(self.status, TaskStatus):
            self.status = TaskStatus(self.status)

    @classmethod
    def from_legacy(
        cls,
        task_id: str,
        required_skills: Optional[List[str]] = None,
        element: Optional[str] = None,
        requirement: Optional[Mapping[str, Any]] = None,
        **kwargs
    ) -> 'TaskDescriptor':
        """
        Normalize either requirement form into the uniform vector shape.

        A full `requirement` mapping wins over a single `element` name.
        """
        if requirement:
            vector = ElementalProfile.from_dict(requirement)
        else:
            parsed = parse_element(element) if element else None
            vector = ElementalProfile.one_hot(parsed) if parsed else ElementalProfile()
        return cls(task_id=task_id, required_skills=list(required_skills or []),
                   requirement=vector, **kwargs)

    @property
    def dominant_element(self) -> Optional[str]:
        return self.requirement.dominant()

    @property
    def is_eligible(self) -> bool:
        """Unassigned and not in a terminal state."""
        return self.assigned_to is None and self.status != TaskStatus.COMPLETED


@dataclass
class ComponentScores:
    """Per-component breakdown. Disabled components stay None."""
    skill: Optional[int] = None
    elemental: Optional[int] = None
    workload: Optional[int] = None

    matched_skills: List[str] = field(default_factory=list)
    elemental_strength: Optional[float] = None
    current_load: Optional[int] = None

    # Unrounded component values; the total is computed from these
    skill_raw: Optional[float] = None
    elemental_raw: Optional[float] = None
    workload_raw: Optional[float] = None

    def raw_total(self) -> float:
        return sum(v for v in (self.skill_raw, self.elemental_raw, self.workload_raw) if v is not None)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.skill is not None:
            data['skill_score'] = self.skill
            data['skill_match'] = list(self.matched_skills)
        if self.elemental is not None:
            data['elemental_score'] = self.elemental
            if self.elemental_strength is not None:
                data['elemental_strength'] = self.elemental_strength
        if self.workload is not None:
            data['workload_score'] = self.workload
            data['current_load'] = self.current_load
        return data


@dataclass
class MemberMatch:
    member_id: str
    total_score: int
    breakdown: ComponentScores
    member_name: Optional[str] = None


@dataclass
class MatchOutcome:
    """
    Ranked result of a task match.

    `no_candidates` is the sentinel for an empty pool: no score was computed.
    """
    task_id: str
    strategy: str
    matches: List[MemberMatch] = field(default_factory=list)
    no_candidates: bool = False

    @property
    def best(self) -> Optional[MemberMatch]:
        return self.matches[0] if self.matches else None


@dataclass
class AssignmentDecision:
    task_id: str
    member_id: str
    auto_matched: bool
    rationale: Optional[MemberMatch] = None
    candidates: List[MemberMatch] = field(default_factory=list)


@dataclass
class ComplementResult:
    member_id: str
    total_score: int
    elemental_score: float
    skill_score: float
    reasons: List[str] = field(default_factory=list)
    member_name: Optional[str] = None
