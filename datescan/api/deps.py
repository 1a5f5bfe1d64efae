from __future__ import annotations

from functools import lru_cache

from datescan.config import Settings, load_settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """FastAPI dependency returning the process-wide :class:`Settings`.

    Usage in route handlers:
        def handler(settings: Settings = Depends(get_settings)):
            ...
    Tests replace it through ``app.dependency_overrides``.
    """
    return load_settings()


__all__ = ["get_settings"]
