# text_transformation/adapters/persistence/config_loader.py
"""
Loads the transformation configuration from a JSON document.

Behaviour
=========
- `load(path)` reads, validates and reference-resolves the document once per
  resolved absolute path. Later calls return the *same* instance, and callers
  may rely on that identity.
- Concurrent first loads of one path parse it at most once: a guard lock
  hands out one lock per path, and the cache is double-checked under it.
- `load_async(path)` runs `load` in a worker thread, so async callers share
  the same cache and the same single-flight guarantee.

Error behaviour
===============
- Missing file             -> ConfigurationNotFoundError
- Invalid JSON / schema    -> MalformedConfigurationError
- Dangling `$lexicon.` ref -> UnresolvedReferenceError

Failures are not cached and there is no retry policy. A new process is the
only way to pick up a changed document.
"""

from __future__ import annotations

import asyncio
import json
import threading
from pathlib import Path
from typing import Any, Dict, List

import structlog
from pydantic import ValidationError

from text_transformation.core.domain.exceptions import (
    ConfigurationNotFoundError,
    MalformedConfigurationError,
)
from text_transformation.core.domain.models import Lexicon, TransformationConfig
from text_transformation.core.domain.references import resolve_lexicon_terms, resolve_references
from text_transformation.core.ports.config_source import IConfigSource, PathLike
from text_transformation.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


def _resolve_path(path: PathLike) -> Path:
    if path is None or not str(path).strip():
        raise ValueError("Configuration path must be a non-empty string.")
    return Path(path).expanduser().resolve()


def _format_validation_error(error: ValidationError) -> str:
    issues = []
    for item in error.errors():
        loc = ".".join(str(p) for p in item.get("loc", ()))
        issues.append(f"{loc or '<root>'}: {item.get('msg')}")
    return "; ".join(issues)


def _read_document(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        raise ConfigurationNotFoundError(str(path))

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise MalformedConfigurationError(str(path), f"invalid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise MalformedConfigurationError(str(path), f"not UTF-8 text: {e}") from e

    if not isinstance(data, dict):
        raise MalformedConfigurationError(
            str(path), f"root must be a JSON object, got {type(data).__name__!r}"
        )
    return data


def parse_configuration(raw: Dict[str, Any], source: str = "<memory>") -> TransformationConfig:
    """
    Build a TransformationConfig from a raw document.

    The lexicon is validated first so that reference tokens in the mapping
    sections can be replaced before the root model is constructed.
    """
    try:
        lexicon = Lexicon.model_validate(raw.get("lexicon") or {})
    except ValidationError as e:
        raise MalformedConfigurationError(source, _format_validation_error(e)) from e

    lexicon = resolve_lexicon_terms(lexicon, source)
    resolved = resolve_references(raw, lexicon, source)
    resolved["lexicon"] = lexicon

    try:
        return TransformationConfig.model_validate(resolved)
    except ValidationError as e:
        raise MalformedConfigurationError(source, _format_validation_error(e)) from e


class ConfigLoader(IConfigSource):
    """
    Loads and caches transformation configurations, one instance per path.

    Inject one loader into every consumer (see `shared.container`) rather than
    keeping module-level state, so tests can use a fresh loader each time.
    """

    def __init__(self) -> None:
        self._cache: Dict[Path, TransformationConfig] = {}
        self._path_locks: Dict[Path, threading.Lock] = {}
        self._guard = threading.Lock()
        self._parse_count = 0

    @property
    def parse_count(self) -> int:
        """Number of documents actually parsed (cache misses) by this loader."""
        return self._parse_count

    def _lock_for(self, path: Path) -> threading.Lock:
        with self._guard:
            lock = self._path_locks.get(path)
            if lock is None:
                lock = self._path_locks[path] = threading.Lock()
            return lock

    def load(self, path: PathLike) -> TransformationConfig:
        """
        Load the configuration at `path`, returning the cached instance when
        it has already been loaded.

        Raises:
            ConfigurationNotFoundError, MalformedConfigurationError,
            UnresolvedReferenceError
        """
        resolved = _resolve_path(path)

        # Fast path (no lock) for already-cached entries.
        existing = self._cache.get(resolved)
        if existing is not None:
            return existing

        # Slow path: parse under the per-path lock, double-checking.
        with self._lock_for(resolved):
            existing = self._cache.get(resolved)
            if existing is not None:
                return existing

            with tracer.start_as_current_span("transformation_config.load") as span:
                span.set_attribute("config.path", str(resolved))
                try:
                    config = parse_configuration(_read_document(resolved), str(resolved))
                except (ConfigurationNotFoundError, MalformedConfigurationError) as e:
                    logger.error("transformation_config_load_failed", path=str(resolved), error=e.message)
                    raise

                self._parse_count += 1
                self._cache[resolved] = config
                logger.info("transformation_config_loaded", path=str(resolved), **config.summary())
                return config

    async def load_async(self, path: PathLike) -> TransformationConfig:
        return await asyncio.to_thread(self.load, path)

    def cached_paths(self) -> List[str]:
        with self._guard:
            return sorted(str(p) for p in self._cache)

    def clear_cache(self) -> None:
        """Forget every cached configuration. Intended for tests."""
        with self._guard:
            self._cache.clear()
            self._path_locks.clear()


__all__ = [
    "ConfigLoader",
    "parse_configuration",
]
