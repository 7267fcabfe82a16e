"""Version reported by the health endpoint."""

from __future__ import annotations

from functools import lru_cache
from importlib import metadata

import langswap

DISTRIBUTION = "langswap"


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """Installed distribution version, or the package's own for source checkouts."""

    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return langswap.__version__


__all__ = ["DISTRIBUTION", "get_project_version"]
