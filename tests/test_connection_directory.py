import os

import pytest

from connectorcore.connection_directory import (
    DEFAULT_TCP_SUBDIRECTORY,
    DEFAULT_UNIX_SUBDIRECTORY,
    commit_open_tcp_port,
    default_tcp_directory,
    default_unix_directory,
    ensure_default_tcp_directory,
    ensure_default_unix_directory,
    remove_open_tcp_port,
    tcp_port_path,
)


def test_directories_use_subdirectory_names(tmp_path):
    assert os.path.basename(default_tcp_directory(tmp_path)) == DEFAULT_TCP_SUBDIRECTORY
    assert (
        os.path.basename(default_unix_directory(tmp_path)) == DEFAULT_UNIX_SUBDIRECTORY
    )
    assert DEFAULT_TCP_SUBDIRECTORY == "substanceconnectoropentcp"
    assert DEFAULT_UNIX_SUBDIRECTORY == "substanceconnectoropenunix"


def test_tcp_directory_under_base(tmp_path):
    assert default_tcp_directory(tmp_path) == str(tmp_path / "substanceconnectoropentcp")


def test_unix_directory_under_base(tmp_path):
    assert default_unix_directory(tmp_path) == str(
        tmp_path / "substanceconnectoropenunix"
    )


def test_tcp_port_path(tmp_path):
    assert tcp_port_path(5000, tmp_path) == str(
        tmp_path / "substanceconnectoropentcp" / "5000"
    )


@pytest.mark.parametrize("port", [-1, 65536, "80"])
def test_tcp_port_path_rejects_invalid_port(tmp_path, port):
    with pytest.raises(ValueError):
        tcp_port_path(port, tmp_path)


def test_ensure_tcp_directory_creates_and_is_idempotent(tmp_path):
    assert ensure_default_tcp_directory(tmp_path) is True
    assert os.path.isdir(default_tcp_directory(tmp_path))
    assert ensure_default_tcp_directory(tmp_path) is True


def test_ensure_unix_directory_creates(tmp_path):
    assert ensure_default_unix_directory(tmp_path) is True
    assert os.path.isdir(default_unix_directory(tmp_path))


def test_ensure_fails_when_base_missing(tmp_path):
    assert ensure_default_tcp_directory(tmp_path / "missing" / "deeper") is False


def test_commit_and_remove_round_trip(tmp_path):
    ensure_default_tcp_directory(tmp_path)
    location = commit_open_tcp_port(1234, tmp_path)
    assert location == tcp_port_path(1234, tmp_path)
    assert os.path.isfile(location)
    assert os.listdir(default_tcp_directory(tmp_path)) == ["1234"]
    remove_open_tcp_port(1234, tmp_path)
    assert not os.path.exists(location)


def test_commit_without_directory_raises(tmp_path):
    with pytest.raises(OSError):
        commit_open_tcp_port(1234, tmp_path)


def test_remove_absent_port_raises(tmp_path):
    ensure_default_tcp_directory(tmp_path)
    with pytest.raises(FileNotFoundError):
        remove_open_tcp_port(4321, tmp_path)