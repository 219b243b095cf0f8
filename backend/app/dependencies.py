"""FastAPI dependency providers."""

from functools import lru_cache

from .services.runtime import RuntimeProbe


@lru_cache(maxsize=1)
def get_runtime_probe() -> RuntimeProbe:
    """Return a singleton probe for the current process."""
    return RuntimeProbe()
