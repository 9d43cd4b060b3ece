from __future__ import annotations

import gzip
from pathlib import Path

import pytest

from bundle_analysis.domain.sizes import ScriptSize
from bundle_analysis.io.layout import BuildPaths
from bundle_analysis.sizes import SizeCache, gzip_size, measure_script_file

def _paths(tmp_path: Path) -> BuildPaths:
    root = tmp_path / ".next"
    root.mkdir()
    return BuildPaths(root=root, build_dir=".next")

def test_measure_script_file_counts_utf8_bytes_and_gzip(tmp_path: Path) -> None:
    text = "const greeting = 'héllo wörld';\n" * 20
    script = tmp_path / "a.js"
    script.write_bytes(text.encode("utf-8"))

    size = measure_script_file(script)

    encoded = text.encode("utf-8")
    assert size.raw == len(encoded)
    assert size.raw > len(text)
    assert size.gzip == len(gzip.compress(encoded, compresslevel=9, mtime=0))
    assert size.gzip < size.raw

def test_gzip_size_is_deterministic() -> None:
    data = b"x" * 4096
    assert gzip_size(data) == gzip_size(data)

def test_script_size_reads_each_file_once(tmp_path: Path) -> None:
    paths = _paths(tmp_path)
    (paths.root / "shared.js").write_text("var shared = 1;", encoding="utf-8")

    calls = []

    def measure(p: Path) -> ScriptSize:
        calls.append(p)
        return ScriptSize(10, 5)

    cache = SizeCache(paths, measure=measure)
    for _ in range(5):
        assert cache.script_size("shared.js") == ScriptSize(10, 5)

    assert calls == [paths.root / "shared.js"]
    assert cache.reads == 1
    assert len(cache) == 1

def test_leading_slash_is_root_relative(tmp_path: Path) -> None:
    paths = _paths(tmp_path)
    cache = SizeCache(paths, measure=lambda p: ScriptSize(1, 1))

    cache.script_size("static/chunks/main.js")
    cache.script_size("/static/chunks/main.js")
    cache.script_size("static/chunks/../chunks/main.js")

    assert cache.reads == 1

def test_script_set_size_sums_and_counts_repeats_once(tmp_path: Path) -> None:
    paths = _paths(tmp_path)
    sizes = {"a.js": ScriptSize(100, 40), "b.js": ScriptSize(50, 20)}
    cache = SizeCache(paths, measure=lambda p: sizes[p.name])

    assert cache.script_set_size(["a.js", "b.js", "a.js"]) == ScriptSize(150, 60)
    assert cache.script_set_size([]) == ScriptSize(0, 0)
    assert cache.reads == 2

def test_missing_script_file_propagates(tmp_path: Path) -> None:
    cache = SizeCache(_paths(tmp_path))
    with pytest.raises(FileNotFoundError):
        cache.script_size("static/chunks/missing.js")
    assert len(cache) == 0

def test_measure_script_file_replaces_invalid_utf8(tmp_path: Path) -> None:
    script = tmp_path / "broken.js"
    script.write_bytes(b"ab\xff\xfe")

    size = measure_script_file(script)

    # each invalid byte becomes U+FFFD (3 bytes in UTF-8)
    replaced = "ab\ufffd\ufffd".encode("utf-8")
    assert size.raw == len(replaced) == 8
    assert size.gzip == gzip_size(replaced)

def test_script_size_sum() -> None:
    total = ScriptSize(3, 2) + ScriptSize(4, 1)
    assert total == ScriptSize(7, 3)
    assert total.to_dict() == {"raw": 7, "gzip": 3}
    assert ScriptSize.zero() + total == total
