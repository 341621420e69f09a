import os
import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings, strategies as st

from syn.errors import PermissionDeniedError, ResolutionError
from syn.flags import PolicyFlags
from syn.resolve import Resolved, SkippedMissing, normalize_path, resolve_operand, resolve_paths
from syn.resolve import resolver
from tests.helpers.fs_factory import listing, make_files

file_name = st.text(alphabet="abcdefghij0123456789_", min_size=1, max_size=10)
# (name, exists on disk before resolution)
operand_table = st.lists(st.tuples(file_name, st.booleans()), max_size=8, unique_by=lambda t: t[0])

DEFAULT = PolicyFlags()
STRICT = PolicyFlags(strict=True)
SOFT = PolicyFlags(soft_strict=True)
COMPARE = PolicyFlags(compare=True)
COMPARE_SOFT = PolicyFlags(compare=True, soft_strict=True)


class TestNormalizePath:
    def test_relative_is_joined_to_base(self):
        assert normalize_path("a.txt", "/work") == "/work/a.txt"

    def test_base_with_trailing_separator(self):
        assert normalize_path("a.txt", "/") == "/a.txt"

    def test_nested_relative(self):
        assert normalize_path("sub/dir/a.txt", "/work") == "/work/sub/dir/a.txt"

    def test_absolute_is_used_verbatim(self):
        assert normalize_path("/etc/../tmp/x", "/work") == "/etc/../tmp/x"


class TestResolveOperand:
    def test_default_creates_missing_file(self, tmp_path):
        outcome = resolve_operand("new.bin", str(tmp_path), DEFAULT)
        assert outcome == Resolved(str(tmp_path / "new.bin"))
        assert (tmp_path / "new.bin").is_file()
        assert (tmp_path / "new.bin").read_bytes() == b""

    def test_default_keeps_existing_content(self, tmp_path):
        make_files(tmp_path, ["data.bin"], content=b"\x00\x01\x02")
        outcome = resolve_operand("data.bin", str(tmp_path), DEFAULT)
        assert outcome == Resolved(str(tmp_path / "data.bin"))
        assert (tmp_path / "data.bin").read_bytes() == b"\x00\x01\x02"

    @pytest.mark.parametrize("flags", [STRICT, SOFT, COMPARE, COMPARE_SOFT])
    def test_existing_file_resolves_under_every_policy(self, tmp_path, flags):
        make_files(tmp_path, ["here.bin"])
        assert resolve_operand("here.bin", str(tmp_path), flags) == Resolved(str(tmp_path / "here.bin"))

    @pytest.mark.parametrize("flags", [STRICT, COMPARE])
    def test_missing_file_is_fatal_when_required(self, tmp_path, flags):
        with pytest.raises(ResolutionError, match="Failed to load '.*ghost.dat'") as exc_info:
            resolve_operand("ghost.dat", str(tmp_path), flags)
        assert exc_info.value.path == str(tmp_path / "ghost.dat")
        assert not (tmp_path / "ghost.dat").exists()

    def test_soft_strict_skips_missing_file(self, tmp_path):
        outcome = resolve_operand("missing.bin", str(tmp_path), SOFT)
        assert outcome == SkippedMissing(str(tmp_path / "missing.bin"))
        assert not (tmp_path / "missing.bin").exists()

    def test_compare_soft_strict_creates_missing_file(self, tmp_path):
        outcome = resolve_operand("left.bin", str(tmp_path), COMPARE_SOFT)
        assert outcome == Resolved(str(tmp_path / "left.bin"))
        assert (tmp_path / "left.bin").is_file()

    def test_absolute_operand_ignores_base(self, tmp_path):
        target = tmp_path / "abs.bin"
        outcome = resolve_operand(str(target), "/nonexistent-base", DEFAULT)
        assert outcome == Resolved(str(target))
        assert target.is_file()

    def test_creation_failure_is_fatal(self, tmp_path):
        with pytest.raises(ResolutionError, match="Failed to load"):
            resolve_operand("no/such/dir/file.bin", str(tmp_path), DEFAULT)

    def test_directory_is_skipped_under_soft_strict(self, tmp_path):
        (tmp_path / "folder").mkdir()
        assert resolve_operand("folder", str(tmp_path), SOFT) == SkippedMissing(str(tmp_path / "folder"))

    @pytest.mark.parametrize("flags", [DEFAULT, STRICT, SOFT, COMPARE, COMPARE_SOFT])
    def test_permission_denied_is_always_fatal(self, tmp_path, monkeypatch, flags):
        def deny(path, create):
            raise PermissionError(13, "Permission denied", path)

        monkeypatch.setattr(resolver, "_probe", deny)
        with pytest.raises(PermissionDeniedError, match="Permission denied: '.*locked.bin'") as exc_info:
            resolve_operand("locked.bin", str(tmp_path), flags)
        assert exc_info.value.path == str(tmp_path / "locked.bin")

    def test_handle_is_released(self, tmp_path):
        before = len(os.listdir("/proc/self/fd")) if os.path.isdir("/proc/self/fd") else None
        for i in range(20):
            resolve_operand(f"f{i}", str(tmp_path), DEFAULT)
        if before is not None:
            assert len(os.listdir("/proc/self/fd")) == before


class TestResolvePaths:
    def test_soft_strict_example(self, tmp_path):
        make_files(tmp_path, ["a.txt", "b.txt"])
        paths = resolve_paths(["a.txt", "missing.bin", "b.txt"], str(tmp_path), SOFT)
        assert paths == [str(tmp_path / "a.txt"), str(tmp_path / "b.txt")]

    def test_strict_example(self, tmp_path):
        with pytest.raises(ResolutionError, match="ghost.dat"):
            resolve_paths(["ghost.dat"], str(tmp_path), STRICT)

    def test_empty_operands(self, tmp_path):
        assert resolve_paths([], str(tmp_path), DEFAULT) == []

    @settings(max_examples=50, deadline=None)
    @given(table=operand_table)
    def test_default_mode_creates_every_file(self, table):
        with tempfile.TemporaryDirectory() as temp_dir:
            base = Path(temp_dir)
            make_files(base, [name for name, exists in table if exists])
            names = [name for name, _ in table]

            paths = resolve_paths(names, temp_dir, DEFAULT)

            assert len(paths) == len(names)
            assert paths == [str(base / name) for name in names]
            assert all(Path(p).is_file() for p in paths)

    @settings(max_examples=50, deadline=None)
    @given(table=operand_table)
    def test_strict_is_all_or_nothing(self, table):
        with tempfile.TemporaryDirectory() as temp_dir:
            base = Path(temp_dir)
            make_files(base, [name for name, exists in table if exists])
            names = [name for name, _ in table]
            before = listing(base)

            if all(exists for _, exists in table):
                assert resolve_paths(names, temp_dir, STRICT) == [str(base / n) for n in names]
            else:
                with pytest.raises(ResolutionError):
                    resolve_paths(names, temp_dir, STRICT)
            assert listing(base) == before

    @settings(max_examples=50, deadline=None)
    @given(table=operand_table)
    def test_soft_strict_yields_existing_subsequence(self, table):
        with tempfile.TemporaryDirectory() as temp_dir:
            base = Path(temp_dir)
            make_files(base, [name for name, exists in table if exists])
            before = listing(base)

            paths = resolve_paths([name for name, _ in table], temp_dir, SOFT)

            assert paths == [str(base / name) for name, exists in table if exists]
            assert len(paths) <= len(table)
            assert listing(base) == before
