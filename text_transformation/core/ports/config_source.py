# text_transformation/core/ports/config_source.py
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from text_transformation.core.domain.models import TransformationConfig

PathLike = Union[str, Path]


class IConfigSource(ABC):
    """
    Interface (Port) for obtaining the transformation configuration.
    Implementations must return the same instance for the same source.
    """

    @abstractmethod
    def load(self, path: PathLike) -> TransformationConfig:
        """Loads (or returns the cached) configuration for `path`."""
        pass

    @abstractmethod
    async def load_async(self, path: PathLike) -> TransformationConfig:
        """Awaitable variant of `load`, sharing the same cache."""
        pass
