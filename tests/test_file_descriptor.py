import os

import pytest

from xtrlog.file_descriptor import FileDescriptor


def _is_valid(fd):
    try:
        os.fstat(fd)
    except OSError:
        return False
    return True


@pytest.fixture
def path(tmp_path):
    return tmp_path / "file.log"


def test_default_is_closed():
    fd = FileDescriptor()
    assert fd.is_open() is False
    assert bool(fd) is False
    assert fd.fd == -1


def test_open_and_write(path):
    fd = FileDescriptor.open(path, os.O_WRONLY | os.O_CREAT | os.O_APPEND, 0o644)
    assert fd.is_open()
    assert os.write(fd.fd, b"hello") == 5
    fd.close()
    assert path.read_bytes() == b"hello"


def test_close_releases_descriptor(path):
    fd = FileDescriptor.open(path, os.O_WRONLY | os.O_CREAT, 0o644)
    raw = fd.fd
    fd.close()
    assert not fd
    assert _is_valid(raw) is False


def test_open_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileDescriptor.open(tmp_path / "missing", os.O_RDONLY)


def test_release_keeps_descriptor_open(path):
    fd = FileDescriptor.open(path, os.O_WRONLY | os.O_CREAT, 0o644)
    raw = fd.release()
    assert fd.fd == -1
    assert not fd
    assert _is_valid(raw)
    os.close(raw)


def test_reset_closes_old_and_takes_new(path, tmp_path):
    fd = FileDescriptor.open(path, os.O_WRONLY | os.O_CREAT, 0o644)
    old = fd.fd
    new = os.open(tmp_path / "other", os.O_WRONLY | os.O_CREAT, 0o644)
    fd.reset(new)
    assert fd.fd == new
    assert _is_valid(new)
    if old != new:
        assert _is_valid(old) is False
    fd.close()
    assert _is_valid(new) is False


def test_context_manager_closes(path):
    with FileDescriptor.open(path, os.O_WRONLY | os.O_CREAT, 0o644) as fd:
        raw = fd.fileno()
        assert _is_valid(raw)
    assert fd.is_open() is False
    assert _is_valid(raw) is False


def test_close_twice_is_harmless(path):
    fd = FileDescriptor.open(path, os.O_WRONLY | os.O_CREAT, 0o644)
    fd.close()
    fd.close()
    assert fd.fd == -1