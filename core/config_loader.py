import yaml
import os
from typing import Optional, Literal
from pydantic import BaseModel, Field


class MatchingConfig(BaseModel):
    """
    Configuration for the Task-Member Match Scorer.

    Weights are point budgets out of 100; strategies that disable a
    component simply drop its points.
    """
    default_strategy: Literal["skill", "elemental", "workload", "hybrid"] = "hybrid"

    skill_weight: float = 40.0
    elemental_weight: float = 30.0
    workload_weight: float = 30.0

    # Neutral scores used when the task states no requirement
    skill_neutral_score: float = 20.0
    elemental_neutral_score: float = 15.0

    # Points deducted from workload_weight for each active task
    workload_cost_per_task: float = 5.0

    # "substring" mirrors the legacy bidirectional containment check,
    # "exact" only accepts case-insensitive equality
    skill_match_mode: Literal["substring", "exact"] = "substring"


class ComplementConfig(BaseModel):
    """
    Configuration for the Member-Member Complement Scorer.
    """
    strong_threshold: float = 60.0  # generator must exceed this
    weak_threshold: float = 60.0    # receiver must be below this
    generative_factor: float = 0.30

    conflict_threshold: float = 70.0
    conflict_penalty: float = 10.0

    overlap_limit: int = 3  # more shared skills than this costs overlap_penalty
    overlap_penalty: float = 10.0
    neutral_skill_score: float = 50.0

    elemental_weight: float = 0.70
    skill_weight: float = 0.30

    default_top_n: int = Field(default=3, ge=1)
    max_reasons: int = 2


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = "0.0.0.0"
    port: int = 8080


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class AppConfig(BaseModel):
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    complement: ComplementConfig = Field(default_factory=ComplementConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from root), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

    # Allow env var override for skill matching mode
    env_match_mode = os.environ.get("TEAMMATCH_SKILL_MATCH_MODE")
    if env_match_mode:
        if 'matching' not in data or data['matching'] is None:
            data['matching'] = {}
        data['matching']['skill_match_mode'] = env_match_mode

    env_strategy = os.environ.get("TEAMMATCH_DEFAULT_STRATEGY")
    if env_strategy:
        if 'matching' not in data or data['matching'] is None:
            data['matching'] = {}
        data['matching']['default_strategy'] = env_strategy

    # Web server overrides
    if 'WEB_HOST' in os.environ:
        if 'web' not in data or data['web'] is None:
            data['web'] = {}
        data['web']['host'] = os.environ['WEB_HOST']

    if 'WEB_PORT' in os.environ:
        if 'web' not in data or data['web'] is None:
            data['web'] = {}
        data['web']['port'] = int(os.environ['WEB_PORT'])

    env_log_level = os.environ.get("LOG_LEVEL")
    if env_log_level:
        if 'logging' not in data or data['logging'] is None:
            data['logging'] = {}
        data['logging']['level'] = env_log_level.upper()

    return AppConfig(**data)
