from pathlib import Path

import pytest

from cfpy.diagnostics import LOADER_FILE_TOO_LARGE, LOADER_IO_ERROR
from cfpy.errors import ConfigIOError
from cfpy.loader import DEFAULT_MAX_SIZE, load_file, resolve_path


def test_resolve_path_against_base_dir(tmp_path: Path) -> None:
    assert resolve_path("a.conf", tmp_path) == tmp_path / "a.conf"
    assert resolve_path(tmp_path / "b.conf", "/elsewhere") == tmp_path / "b.conf"
    assert resolve_path("c.conf") == Path("c.conf")


def test_load_file_reads_bytes(tmp_path: Path) -> None:
    (tmp_path / "app.conf").write_bytes(b"a { b = 1 }\n")

    assert load_file("app.conf", base_dir=tmp_path) == b"a { b = 1 }\n"


def test_missing_file_raises_io_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigIOError) as exc:
        load_file(tmp_path / "missing.conf")

    assert exc.value.code == LOADER_IO_ERROR.code
    assert exc.value.path.endswith("missing.conf")


def test_directory_raises_io_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigIOError) as exc:
        load_file(tmp_path)

    assert exc.value.code == LOADER_IO_ERROR.code


def test_size_limit(tmp_path: Path) -> None:
    path = tmp_path / "big.conf"
    path.write_bytes(b"#" * 16)

    assert len(load_file(path, max_size=16)) == 16

    with pytest.raises(ConfigIOError) as exc:
        load_file(path, max_size=15)

    assert exc.value.code == LOADER_FILE_TOO_LARGE.code


def test_default_size_limit_is_one_mebibyte(tmp_path: Path) -> None:
    path = tmp_path / "huge.conf"
    path.write_bytes(b"#" * (DEFAULT_MAX_SIZE + 1))

    with pytest.raises(ConfigIOError) as exc:
        load_file(path)

    assert exc.value.code == LOADER_FILE_TOO_LARGE.code


def test_negative_size_limit_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        load_file(tmp_path / "any.conf", max_size=-1)
