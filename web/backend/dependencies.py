#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from functools import lru_cache

from core.matching import MatchingService
from .config import get_config
from .services.match_service import MatchService


@lru_cache()
def get_matching_engine() -> MatchingService:
    """
    Shared engine instance built from configuration.

    The engine keeps no per-request state, so one instance serves every request.
    """
    config = get_config()
    return MatchingService(config.matching, config.complement)


def get_match_service() -> MatchService:
    """
    FastAPI dependency that yields the request-facing match service.

    Usage:
        @router.post("/endpoint")
        def my_endpoint(service: MatchService = Depends(get_match_service)):
            ...
    """
    return MatchService(get_matching_engine())
