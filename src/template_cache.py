"""
Template cache: memoises generated layouts by the order-independent set of
chosen shapes.

Two interchangeable backends share one interface:
  - InMemoryTemplateCache: volatile dict, per-process
  - FileTemplateCache: one JSON file per template plus an index file,
    written atomically, optionally limited to a byte quota

TemplateManager composes a cache with the placement engine. The cache is
passed in explicitly so tests (and callers) can isolate instances.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
import weakref
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from shape_library import resolve_shape_id
from template_contracts import (
    CacheWriteError,
    InvalidSelectionError,
    PuzzleTemplate,
    TemplateConfig,
    hash_shape_combination,
)
from template_generator import TemplateGenerator, validate_selection

logger = logging.getLogger(__name__)

KEY_PREFIX = "puzzle-template-"
INDEX_FILENAME = "puzzle-template-index.json"


@dataclass
class CacheStats:
    total_templates: int
    total_pieces: int
    hit_count: int
    miss_count: int
    hit_rate: float

    def to_dict(self) -> Dict[str, object]:
        return {
            "totalTemplates": self.total_templates,
            "totalPieces": self.total_pieces,
            "hitCount": self.hit_count,
            "missCount": self.miss_count,
            "hitRate": self.hit_rate,
        }


class TemplateCache(ABC):
    """Cache interface keyed by ``hash_shape_combination(shape_ids)``.

    Subclasses implement storage by key; hit/miss accounting and the
    shape-id based API live here. Aliases resolve before hashing, so
    ``leaf-simple`` and ``leaf`` name the same entry.
    """

    def __init__(self):
        self.hit_count = 0
        self.miss_count = 0

    # ── storage primitives ──

    @abstractmethod
    def _load(self, key: str) -> Optional[PuzzleTemplate]:
        ...

    @abstractmethod
    def _store(self, template: PuzzleTemplate) -> None:
        ...

    @abstractmethod
    def _remove(self, key: str) -> bool:
        ...

    @abstractmethod
    def keys(self) -> List[str]:
        ...

    # ── public API ──

    @staticmethod
    def key_for(shape_ids: Iterable[str]) -> str:
        return hash_shape_combination(resolve_shape_id(s) for s in shape_ids)

    def get(self, shape_ids: Iterable[str]) -> Optional[PuzzleTemplate]:
        template = self._load(self.key_for(shape_ids))
        if template is None:
            self.miss_count += 1
        else:
            self.hit_count += 1
        return template

    def set(self, template: PuzzleTemplate) -> None:
        self._store(template)

    def has(self, shape_ids: Iterable[str]) -> bool:
        return self.key_for(shape_ids) in self.keys()

    def delete(self, shape_ids: Iterable[str]) -> bool:
        return self._remove(self.key_for(shape_ids))

    def clear(self) -> None:
        for key in self.keys():
            self._remove(key)
        self.hit_count = 0
        self.miss_count = 0

    def get_all(self) -> List[PuzzleTemplate]:
        templates = []
        for key in self.keys():
            template = self._load(key)
            if template is not None:
                templates.append(template)
        return templates

    def get_stats(self) -> CacheStats:
        templates = self.get_all()
        lookups = self.hit_count + self.miss_count
        return CacheStats(
            total_templates=len(templates),
            total_pieces=sum(len(t.pieces) for t in templates),
            hit_count=self.hit_count,
            miss_count=self.miss_count,
            hit_rate=self.hit_count / lookups if lookups else 0.0,
        )


class InMemoryTemplateCache(TemplateCache):

    def __init__(self):
        super().__init__()
        self._templates: Dict[str, PuzzleTemplate] = {}

    def _load(self, key: str) -> Optional[PuzzleTemplate]:
        return self._templates.get(key)

    def _store(self, template: PuzzleTemplate) -> None:
        self._templates[template.id] = template

    def _remove(self, key: str) -> bool:
        return self._templates.pop(key, None) is not None

    def keys(self) -> List[str]:
        return list(self._templates)


class FileTemplateCache(TemplateCache):
    """Persisted cache: ``<root>/puzzle-template-<id>.json`` plus an index.

    Each template is written to a temporary file and moved into place, so
    readers never see a torn write. When ``quota_bytes`` is set, a write
    that would push the stored template bytes over the quota fails; the
    cache then evicts the single oldest template (by ``createdAt``) and
    retries once before raising CacheWriteError.
    """

    def __init__(self, root, quota_bytes: Optional[int] = None):
        super().__init__()
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)
        self.quota_bytes = quota_bytes
        self.index_path = self.root / INDEX_FILENAME

    def _path(self, key: str) -> Path:
        return self.root / f"{KEY_PREFIX}{key}.json"

    # ── index ──

    def keys(self) -> List[str]:
        if not self.index_path.exists():
            return []
        try:
            with self.index_path.open("r", encoding="utf-8") as f:
                index = json.load(f)
        except json.JSONDecodeError:
            logger.warning("Template index %s is corrupt, rebuilding", self.index_path)
            index = self._rebuild_index()
        return [str(k) for k in index]

    def _rebuild_index(self) -> List[str]:
        keys = sorted(
            p.name[len(KEY_PREFIX):-len(".json")]
            for p in self.root.glob(f"{KEY_PREFIX}*.json")
            if p.name != INDEX_FILENAME
        )
        self._write_index(keys)
        return keys

    def _write_index(self, keys: Sequence[str]) -> None:
        self._atomic_write(self.index_path, json.dumps(list(keys)))

    # ── storage ──

    def _load(self, key: str) -> Optional[PuzzleTemplate]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            with path.open("r", encoding="utf-8") as f:
                return PuzzleTemplate.from_dict(json.load(f))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Unreadable cached template %s: %s", path.name, exc)
            return None

    def _store(self, template: PuzzleTemplate) -> None:
        payload = json.dumps(template.to_dict())
        try:
            self._write_template(template.id, payload)
        except CacheWriteError as exc:
            evicted = self._evict_oldest(exclude=template.id)
            if evicted is None:
                raise
            logger.warning("Cache write failed (%s), evicted %s and retrying", exc, evicted)
            self._write_template(template.id, payload)

    def _write_template(self, key: str, payload: str) -> None:
        size = len(payload.encode("utf-8"))
        if self.quota_bytes is not None:
            used = self.used_bytes(exclude=key)
            if used + size > self.quota_bytes:
                raise CacheWriteError(
                    f"Quota exceeded: {used} + {size} > {self.quota_bytes} bytes"
                )
        path = self._path(key)
        try:
            self._atomic_write(path, payload)
        except OSError as exc:
            raise CacheWriteError(f"Could not write template {key}: {exc}") from exc

        try:
            index = self.keys()
            if key not in index:
                index.append(key)
                self._write_index(index)
        except OSError as exc:
            # eviction and clear() only see indexed files
            path.unlink(missing_ok=True)
            raise CacheWriteError(f"Could not index template {key}: {exc}") from exc

    def _atomic_write(self, path: Path, content: str) -> None:
        fd, tmp_name = tempfile.mkstemp(dir=str(self.root), prefix=".tmp-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, path)
        except OSError:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def _remove(self, key: str) -> bool:
        path = self._path(key)
        existed = path.exists()
        if existed:
            path.unlink()
        index = self.keys()
        if key in index:
            self._write_index([k for k in index if k != key])
        return existed

    def used_bytes(self, exclude: Optional[str] = None) -> int:
        total = 0
        for key in self.keys():
            if key == exclude:
                continue
            path = self._path(key)
            if path.exists():
                total += path.stat().st_size
        return total

    def _evict_oldest(self, exclude: Optional[str] = None) -> Optional[str]:
        candidates = [t for t in self.get_all() if t.id != exclude]
        if not candidates:
            return None
        oldest = min(candidates, key=lambda t: t.created_at)
        self._remove(oldest.id)
        return oldest.id


# ─── Manager ─────────────────────────────────────────────────────────────────

class TemplateManager:
    """Cache-first template access.

    Args:
        cache: Backing cache; defaults to a fresh in-memory cache.
        config: Generation config used on cache misses.
        seed: Seed handed to each generation; None for fresh entropy.
    """

    def __init__(
        self,
        cache: Optional[TemplateCache] = None,
        config: Optional[TemplateConfig] = None,
        seed: Optional[int] = None,
    ):
        self.cache = cache if cache is not None else InMemoryTemplateCache()
        self.config = config or TemplateConfig()
        self.seed = seed
        # Entries live only while some caller holds the lock
        self._locks: "weakref.WeakValueDictionary[str, threading.Lock]" = weakref.WeakValueDictionary()
        self._locks_guard = threading.Lock()

    def _lock_for(self, key: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(key, threading.Lock())

    def get_or_create_template(self, shape_ids: Sequence[str]) -> PuzzleTemplate:
        """Cached template for a selection, generating and storing it on a miss.

        Selections are validated before the cache is consulted, so an
        invalid selection never produces a cache entry.
        """
        selected = validate_selection(shape_ids, self.config)
        key = self.cache.key_for(selected)

        with self._lock_for(key):
            cached = self.cache.get(selected)
            if cached is not None:
                logger.info("Template cache hit: %s", key)
                return cached

            logger.info("Template cache miss: %s, generating", key)
            template = TemplateGenerator(self.config, seed=self.seed).generate(selected)
            self.cache.set(template)
            return template

    def pregenerate_templates(
        self,
        combinations: Optional[Iterable[Sequence[str]]] = None,
    ) -> int:
        """Generate templates for combinations not yet cached.

        Combinations with unknown ids or the wrong size are skipped with a
        warning. Returns the number of newly generated templates.
        """
        if combinations is None:
            combinations = POPULAR_COMBINATIONS.values()

        generated = 0
        for shape_ids in combinations:
            try:
                selected = validate_selection(shape_ids, self.config)
            except InvalidSelectionError as exc:
                logger.warning("Skipping combination %s: %s", ",".join(shape_ids), exc)
                continue
            if self.cache.has(selected):
                continue
            self.get_or_create_template(selected)
            generated += 1

        logger.info("Pre-generated %d new template(s)", generated)
        return generated

    def get_stats(self) -> CacheStats:
        return self.cache.get_stats()

    def clear(self) -> None:
        self.cache.clear()

    def get_all_templates(self) -> List[PuzzleTemplate]:
        return self.cache.get_all()


# Occasion packs. Some entries name silhouettes the catalog does not carry
# yet; pre-generation skips those packs.
POPULAR_COMBINATIONS: Dict[str, List[str]] = {
    "birthday": ["balloon", "gift", "cake", "star", "heart", "confetti", "crown", "ribbon", "candle", "party"],
    "wedding": ["heart", "ring", "dove", "flower", "bell", "champagne", "cake", "bow", "star", "butterfly"],
    "nature": ["tree", "flower", "sun", "leaf", "mountain", "butterfly", "bird", "cloud", "rainbow", "mushroom"],
    "travel": ["airplane", "car", "compass", "anchor", "globe", "camera", "suitcase", "map", "palm", "lighthouse"],
    "kids": ["dolphin", "cat", "butterfly", "star", "heart", "sun", "balloon", "car", "airplane", "fish"],
}
