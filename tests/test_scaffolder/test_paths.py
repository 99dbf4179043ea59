"""Tests for the confined and unconfined path resolvers.

Covers:
- Confined resolution inside the base (positive)
- Traversal rejection (negative), including absolute paths
- The sibling-prefix boundary (``/tmp/proj`` vs ``/tmp/proj-other``)
- The unconfined resolver accepting traversal on purpose
"""

from __future__ import annotations

from pathlib import Path

import pytest

from tfgen.scaffolder.errors import PathTraversalError, ScaffoldError
from tfgen.scaffolder.paths import ConfinedResolver, PathResolver, UnconfinedResolver

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# ConfinedResolver
# ---------------------------------------------------------------------------


class TestConfinedResolver:
    def test_positive(self):
        resolver = ConfinedResolver("/tmp/proj")
        assert resolver.resolve("sub/dir/file.txt") == Path("/tmp/proj/sub/dir/file.txt")

    def test_base_is_made_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        resolver = ConfinedResolver("proj")
        assert resolver.base == tmp_path / "proj"
        assert resolver.resolve("a.txt") == tmp_path / "proj" / "a.txt"

    def test_negative_traversal(self):
        with pytest.raises(PathTraversalError) as exc_info:
            ConfinedResolver("/tmp/proj").resolve("../../etc/passwd")
        assert "path traversal detected" in str(exc_info.value)
        assert exc_info.value.base == "/tmp/proj"

    @pytest.mark.parametrize("base", ["/tmp/proj", "/srv/data/app", "/a"])
    def test_negative_traversal_any_base(self, base):
        with pytest.raises(PathTraversalError):
            ConfinedResolver(base).resolve("../../etc/passwd")

    def test_root_base_clamps_traversal(self):
        assert ConfinedResolver("/").resolve("../../etc/passwd") == Path("/etc/passwd")

    def test_sibling_with_shared_prefix_is_rejected(self):
        resolver = ConfinedResolver("/tmp/proj")
        with pytest.raises(PathTraversalError):
            resolver.resolve("../proj-other/file.txt")

    def test_sibling_via_absolute_path_is_rejected(self):
        with pytest.raises(PathTraversalError):
            ConfinedResolver("/tmp/proj").resolve("/tmp/proj-other/file.txt")

    def test_absolute_path_outside_is_rejected(self):
        with pytest.raises(PathTraversalError):
            ConfinedResolver("/tmp/proj").resolve("/etc/passwd")

    def test_absolute_path_inside_is_accepted(self):
        resolver = ConfinedResolver("/tmp/proj")
        assert resolver.resolve("/tmp/proj/a/b") == Path("/tmp/proj/a/b")

    def test_base_itself_is_accepted(self):
        resolver = ConfinedResolver("/tmp/proj")
        assert resolver.resolve(".") == Path("/tmp/proj")
        assert resolver.resolve("sub/..") == Path("/tmp/proj")

    def test_inner_dotdot_that_stays_inside(self):
        resolver = ConfinedResolver("/tmp/proj")
        assert resolver.resolve("a/../b/c.txt") == Path("/tmp/proj/b/c.txt")

    def test_error_is_a_scaffold_error(self):
        assert issubclass(PathTraversalError, ScaffoldError)

    def test_read_bytes(self, tmp_path):
        (tmp_path / "data.txt").write_bytes(b"hello")
        assert ConfinedResolver(tmp_path).read_bytes("data.txt") == b"hello"


# ---------------------------------------------------------------------------
# UnconfinedResolver
# ---------------------------------------------------------------------------


class TestUnconfinedResolver:
    def test_accepts_traversal(self):
        resolver = UnconfinedResolver()
        assert resolver.resolve("/tmp/proj/../../etc/passwd") == Path("/etc/passwd")

    def test_relative_paths_become_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert UnconfinedResolver().resolve("x/../y.txt") == tmp_path / "y.txt"

    def test_reads_outside_any_base(self, tmp_path):
        outside = tmp_path / "outside.txt"
        outside.write_bytes(b"secret")
        inner = tmp_path / "base" / ".." / "outside.txt"
        assert UnconfinedResolver().read_bytes(inner) == b"secret"

    def test_missing_file_raises_oserror(self, tmp_path):
        with pytest.raises(OSError):
            UnconfinedResolver().read_bytes(tmp_path / "missing")


def test_both_variants_share_the_interface():
    assert isinstance(ConfinedResolver("/tmp"), PathResolver)
    assert isinstance(UnconfinedResolver(), PathResolver)
