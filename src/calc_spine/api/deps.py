"""
FastAPI dependency injection - shared singletons.

Usage in routers::

    from calc_spine.api.deps import Settings

    @router.post("/calculate")
    def calculate(body: CalculateRequest, settings: Settings):
        ...
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from calc_spine.api.settings import CalcAPISettings


@lru_cache(maxsize=1)
def get_settings() -> CalcAPISettings:
    """Cached settings - loaded once per process."""
    return CalcAPISettings()


Settings = Annotated[CalcAPISettings, Depends(get_settings)]
