"""Tests for template_cache.py: backends, eviction and the manager."""
import gc
import json
import threading

import pytest

from template_cache import (
    INDEX_FILENAME,
    POPULAR_COMBINATIONS,
    FileTemplateCache,
    InMemoryTemplateCache,
    TemplateManager,
)
from template_contracts import (
    CacheWriteError,
    InvalidSelectionError,
    PlacedPiece,
    PuzzleTemplate,
    TemplateConfig,
    hash_shape_combination,
)


def _template(shapes, created_at, pieces=4):
    return PuzzleTemplate(
        id=hash_shape_combination(shapes),
        shapes=sorted(shapes),
        pieces=[PlacedPiece(f"piece-{i}", f"{shapes[0]}_ApArApAr", i, 0, 0) for i in range(pieces)],
        grid_width=pieces,
        grid_height=1,
        cell_size=50.0,
        shape_counts={s: pieces // len(shapes) for s in shapes},
        created_at=created_at,
    )


@pytest.fixture(params=["memory", "file"])
def cache(request, tmp_path):
    if request.param == "memory":
        return InMemoryTemplateCache()
    return FileTemplateCache(tmp_path / "cache")


class TestCacheContract:
    """Both backends honour the same interface."""

    def test_miss_then_hit(self, cache):
        template = _template(["heart", "star"], 1.0)
        assert cache.get(["star", "heart"]) is None
        cache.set(template)
        hit = cache.get(["star", "heart"])
        assert hit.id == template.id
        assert hit.pieces == template.pieces

    def test_has_and_delete(self, cache):
        cache.set(_template(["heart", "star"], 1.0))
        assert cache.has(["heart", "star"])
        assert cache.delete(["star", "heart"])
        assert not cache.has(["heart", "star"])
        assert not cache.delete(["star", "heart"])

    def test_get_all_and_stats(self, cache):
        cache.set(_template(["heart", "star"], 1.0, pieces=4))
        cache.set(_template(["moon", "sun"], 2.0, pieces=6))
        cache.get(["heart", "star"])
        cache.get(["cat", "dog"])

        assert {t.id for t in cache.get_all()} == {"heart-star", "moon-sun"}
        stats = cache.get_stats()
        assert stats.total_templates == 2
        assert stats.total_pieces == 10
        assert stats.hit_count == 1
        assert stats.miss_count == 1
        assert stats.hit_rate == pytest.approx(0.5)
        assert stats.to_dict()["hitRate"] == pytest.approx(0.5)

    def test_clear_resets_counters(self, cache):
        cache.set(_template(["heart", "star"], 1.0))
        cache.get(["heart", "star"])
        cache.clear()
        assert cache.get_all() == []
        assert cache.get_stats().hit_count == 0

    def test_empty_stats(self, cache):
        assert cache.get_stats().hit_rate == 0.0

    def test_aliases_name_the_same_entry(self, cache):
        cache.set(_template(["leaf", "star"], 1.0))
        assert cache.has(["leaf-simple", "star"])
        assert cache.get(["star", "leaf-simple"]) is not None
        assert cache.delete(["leaf-simple", "star"])
        assert not cache.has(["leaf", "star"])


class TestFileTemplateCache:
    def test_layout_on_disk(self, tmp_path):
        cache = FileTemplateCache(tmp_path)
        cache.set(_template(["heart", "star"], 1.0))
        assert (tmp_path / "puzzle-template-heart-star.json").exists()
        index = json.loads((tmp_path / INDEX_FILENAME).read_text())
        assert index == ["heart-star"]
        assert not list(tmp_path.glob(".tmp-*"))

    def test_persists_across_instances(self, tmp_path):
        FileTemplateCache(tmp_path).set(_template(["heart", "star"], 1.0))
        restored = FileTemplateCache(tmp_path).get(["heart", "star"])
        assert restored is not None
        assert restored.created_at == 1.0

    def test_overwrite_keeps_single_index_entry(self, tmp_path):
        cache = FileTemplateCache(tmp_path)
        cache.set(_template(["heart", "star"], 1.0))
        cache.set(_template(["heart", "star"], 2.0))
        assert cache.keys() == ["heart-star"]

    def test_quota_evicts_oldest_and_retries(self, tmp_path):
        sizing = FileTemplateCache(tmp_path / "sizing")
        sizing.set(_template(["heart", "star"], 1.0))
        size = sizing.used_bytes()

        cache = FileTemplateCache(tmp_path / "cache", quota_bytes=int(size * 2.5))
        cache.set(_template(["heart", "star"], 1.0))
        cache.set(_template(["moon", "sun"], 2.0))
        cache.set(_template(["cat", "dog"], 3.0))

        assert not cache.has(["heart", "star"])
        assert cache.has(["moon", "sun"])
        assert cache.has(["cat", "dog"])

    def test_quota_too_small_raises(self, tmp_path):
        cache = FileTemplateCache(tmp_path, quota_bytes=10)
        with pytest.raises(CacheWriteError):
            cache.set(_template(["heart", "star"], 1.0))
        assert cache.keys() == []

    def test_corrupt_index_is_rebuilt(self, tmp_path):
        cache = FileTemplateCache(tmp_path)
        cache.set(_template(["heart", "star"], 1.0))
        (tmp_path / INDEX_FILENAME).write_text("{not json")
        assert cache.keys() == ["heart-star"]

    def test_unreadable_template_is_a_miss(self, tmp_path):
        cache = FileTemplateCache(tmp_path)
        cache.set(_template(["heart", "star"], 1.0))
        (tmp_path / "puzzle-template-heart-star.json").write_text("{}")
        assert cache.get(["heart", "star"]) is None

    def test_failed_index_write_leaves_no_orphan(self, tmp_path, monkeypatch):
        def disk_full(self, keys):
            raise OSError(28, "No space left on device")

        cache = FileTemplateCache(tmp_path)
        monkeypatch.setattr(FileTemplateCache, "_write_index", disk_full)
        with pytest.raises(CacheWriteError):
            cache.set(_template(["heart", "star"], 1.0))
        assert not list(tmp_path.glob("puzzle-template-*.json"))
        assert not cache.has(["heart", "star"])

    def test_failed_index_write_evicts_and_retries(self, tmp_path, monkeypatch):
        cache = FileTemplateCache(tmp_path)
        cache.set(_template(["heart", "star"], 1.0))

        write_index = FileTemplateCache._write_index
        failures = [OSError(28, "No space left on device")]

        def full_once(self, keys):
            if failures:
                raise failures.pop()
            write_index(self, keys)

        monkeypatch.setattr(FileTemplateCache, "_write_index", full_once)
        cache.set(_template(["moon", "sun"], 2.0))

        assert cache.keys() == ["moon-sun"]
        assert not (tmp_path / "puzzle-template-heart-star.json").exists()
        assert cache.get(["moon", "sun"]) is not None


class TestTemplateManager:
    def test_get_or_create_is_idempotent(self, ten_shapes, small_config):
        manager = TemplateManager(config=small_config, seed=7)
        first = manager.get_or_create_template(ten_shapes)
        second = manager.get_or_create_template(list(reversed(ten_shapes)))
        assert second is first
        stats = manager.get_stats()
        assert stats.hit_count == 1
        assert stats.miss_count == 1
        assert stats.total_templates == 1

    def test_file_backed_hit_returns_same_pieces(self, ten_shapes, small_config, tmp_path):
        first = TemplateManager(FileTemplateCache(tmp_path), small_config, seed=7)
        template = first.get_or_create_template(ten_shapes)
        second = TemplateManager(FileTemplateCache(tmp_path), small_config, seed=8)
        again = second.get_or_create_template(ten_shapes)
        assert again.id == template.id
        assert again.pieces == template.pieces

    def test_invalid_selection_creates_no_entry(self, ten_shapes, small_config):
        manager = TemplateManager(config=small_config)
        with pytest.raises(InvalidSelectionError):
            manager.get_or_create_template(ten_shapes[:9])
        assert manager.get_all_templates() == []
        assert manager.get_stats().miss_count == 0

    def test_caches_are_isolated(self, ten_shapes, small_config):
        a = TemplateManager(config=small_config, seed=1)
        b = TemplateManager(config=small_config, seed=1)
        a.get_or_create_template(ten_shapes)
        assert b.get_all_templates() == []

    def test_concurrent_callers_generate_once(self, ten_shapes, small_config):
        manager = TemplateManager(config=small_config, seed=3)
        results = []

        def worker():
            results.append(manager.get_or_create_template(ten_shapes))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len({id(r) for r in results}) == 1
        assert manager.get_stats().miss_count == 1

    def test_locks_do_not_outlive_generation(self, ten_shapes, small_config):
        manager = TemplateManager(config=small_config, seed=3)
        manager.get_or_create_template(ten_shapes)
        manager.get_or_create_template(ten_shapes)
        gc.collect()
        assert len(manager._locks) == 0

    def test_pregenerate_skips_invalid_combinations(self, caplog):
        manager = TemplateManager(config=TemplateConfig(total_pieces=20, copies_per_shape=2), seed=0)
        generated = manager.pregenerate_templates()

        valid = ["nature", "kids"]
        assert generated == len(valid)
        cached = {t.id for t in manager.get_all_templates()}
        assert cached == {hash_shape_combination(POPULAR_COMBINATIONS[n]) for n in valid}
        assert "Skipping combination" in caplog.text

        # Second pass finds everything cached
        assert manager.pregenerate_templates() == 0

    def test_clear(self, ten_shapes, small_config):
        manager = TemplateManager(config=small_config)
        manager.get_or_create_template(ten_shapes)
        manager.clear()
        assert manager.get_all_templates() == []
