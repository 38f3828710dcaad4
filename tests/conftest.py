"""Shared fixtures."""

import errno
import os

import pytest

# Latin-1 "café.txt"; not valid UTF-8
RAW_NAME = b"caf\xe9.txt"


@pytest.fixture
def deny_stat(monkeypatch):
    """Make os.stat fail with EACCES for chosen paths.

    Returns a function that adds a path to the denied set. Other paths
    are stat'ed normally.
    """
    denied = set()
    real_stat = os.stat

    def fake_stat(path, *args, **kwargs):
        if os.path.abspath(os.fspath(path)) in denied:
            raise PermissionError(errno.EACCES, "Permission denied", os.fspath(path))
        return real_stat(path, *args, **kwargs)

    monkeypatch.setattr(os, "stat", fake_stat)

    def deny(path):
        denied.add(os.path.abspath(os.fspath(path)))

    return deny


@pytest.fixture
def raw_name(tmp_path):
    """Name of a file in tmp_path whose on-disk name is RAW_NAME.

    The file holds b"123456789". Skipped where the filesystem rejects
    names that are not valid in its encoding.
    """
    name = os.fsdecode(RAW_NAME)
    try:
        (tmp_path / name).write_bytes(b"123456789")
    except (OSError, UnicodeError):
        pytest.skip("filesystem does not accept undecodable names")
    return name
