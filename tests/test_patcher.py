import os

import pytest

from text_compare.errors import FileAccessError
from text_compare.patcher import patch_line


def test_replaces_whole_first_matching_line(tmp_path, write_lines):
    target = write_lines(tmp_path / "edi.txt", ["ISA*00", "K3*MDQA123", "SE*2"])

    assert patch_line(str(target), "K3*MDQA", "K3*Updated line!") is True

    assert target.read_text().splitlines() == ["ISA*00", "K3*Updated line!", "SE*2"]


def test_only_first_match_is_altered(tmp_path, write_lines):
    target = write_lines(tmp_path / "edi.txt", ["K3*MDQA1", "N1*X", "K3*MDQA2"])

    patch_line(str(target), "K3*MDQA", "K3*NEW")

    lines = target.read_text().splitlines()
    assert lines == ["K3*NEW", "N1*X", "K3*MDQA2"]


def test_line_count_unchanged(tmp_path, write_lines):
    original = [f"row {i}" for i in range(10)]
    target = write_lines(tmp_path / "rows.txt", original)

    patch_line(str(target), "row 6", "patched")

    lines = target.read_text().splitlines()
    assert len(lines) == len(original)
    assert [i for i, (a, b) in enumerate(zip(original, lines)) if a != b] == [6]


def test_no_match_leaves_file_byte_identical(tmp_path):
    target = tmp_path / "keep.txt"
    payload = b"first\r\nsecond\nthird"
    target.write_bytes(payload)
    mtime = os.stat(target).st_mtime_ns

    assert patch_line(str(target), "absent", "whatever") is False

    assert target.read_bytes() == payload
    assert os.stat(target).st_mtime_ns == mtime


def test_line_endings_preserved(tmp_path):
    target = tmp_path / "crlf.txt"
    target.write_bytes(b"a\r\nK3*MDQA9\r\nc")

    patch_line(str(target), "K3*MDQA", "K3*X")

    assert target.read_bytes() == b"a\r\nK3*X\r\nc"


def test_missing_file(tmp_path):
    with pytest.raises(FileAccessError):
        patch_line(str(tmp_path / "missing.txt"), "a", "b")


def test_unencodable_replacement_keeps_file_intact(tmp_path):
    target = tmp_path / "latin.txt"
    payload = b"keep1\nK3*MDQA123\nkeep3\nkeep4\n"
    target.write_bytes(payload)

    with pytest.raises(FileAccessError):
        patch_line(str(target), "K3*MDQA", "K3*€", encoding="latin-1")

    assert target.read_bytes() == payload
    assert [p.name for p in tmp_path.iterdir()] == ["latin.txt"]


def test_failed_swap_keeps_file_intact(tmp_path, write_lines, monkeypatch):
    target = write_lines(tmp_path / "edi.txt", ["a", "K3*MDQA123", "c"])
    payload = target.read_bytes()

    def denied(src, dst):
        raise PermissionError(13, "Permission denied", dst)

    monkeypatch.setattr(os, "replace", denied)
    with pytest.raises(FileAccessError):
        patch_line(str(target), "K3*MDQA", "K3*X")

    assert target.read_bytes() == payload
    assert [p.name for p in tmp_path.iterdir()] == ["edi.txt"]


@pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root ignores file permissions")
def test_read_only_file(tmp_path, write_lines):
    target = write_lines(tmp_path / "ro.txt", ["a", "K3*MDQA123"])
    payload = target.read_bytes()
    target.chmod(0o444)
    try:
        with pytest.raises(FileAccessError):
            patch_line(str(target), "K3*MDQA", "K3*X")
        assert target.read_bytes() == payload
    finally:
        target.chmod(0o644)


def test_not_writable_is_refused(tmp_path, write_lines, monkeypatch):
    target = write_lines(tmp_path / "ro.txt", ["a", "K3*MDQA123"])
    payload = target.read_bytes()
    monkeypatch.setattr(os, "access", lambda path, mode: not (mode & os.W_OK))

    with pytest.raises(FileAccessError):
        patch_line(str(target), "K3*MDQA", "K3*X")

    assert target.read_bytes() == payload


def test_patch_keeps_file_mode(tmp_path, write_lines):
    target = write_lines(tmp_path / "run.sh", ["echo K3*MDQA1"])
    target.chmod(0o750)

    patch_line(str(target), "K3*MDQA", "echo done")

    assert (target.stat().st_mode & 0o777) == 0o750
