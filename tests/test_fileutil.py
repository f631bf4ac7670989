import os

import pytest

from wfrest.fileutil import (
    create_directories,
    create_file_with_size,
    file_exists,
    remove_directory,
    size,
)


def test_size(tmp_path):
    file_path = tmp_path / "example.txt"
    file_path.write_text("Writing this to a file.\n")
    assert size(str(file_path)) == 24
    file_path.unlink()
    assert not file_exists(str(file_path))


def test_size_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        size(str(tmp_path / "missing.txt"))


@pytest.mark.parametrize("name", ["example.md", "example.txt"])
def test_file_exists(tmp_path, name):
    file_path = tmp_path / name
    file_path.write_text("Writing this to a file.\n")
    assert file_exists(str(file_path))
    file_path.unlink()
    assert not file_exists(str(file_path))


def test_file_exists_false_for_dir(tmp_path):
    assert not file_exists(str(tmp_path))


def test_create_directories_nested(tmp_path):
    target = f"{tmp_path}/a/b/c"
    create_directories(target)
    assert os.path.isdir(target)
    assert not file_exists(target)
    create_directories(target)
    inner = f"{target}/inner.txt"
    create_file_with_size(inner, 5)
    assert file_exists(inner)
    assert size(inner) == 5


def test_create_directories_trailing_slash(tmp_path):
    target = f"{tmp_path}/x/y/"
    create_directories(target)
    assert os.path.isdir(target)
    inner = f"{target}data.bin"
    create_file_with_size(inner, 3)
    assert size(inner) == 3


def test_create_directories_failure(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    with pytest.raises(OSError):
        create_directories(f"{blocker}/child")


def test_remove_directory(tmp_path):
    root = tmp_path / "root"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "file.txt").write_text("data")
    (root / "sub" / "deeper" / "inner.txt").write_text("more")
    remove_directory(str(root))
    assert not root.exists()


def test_remove_missing_directory(tmp_path):
    with pytest.raises(OSError):
        remove_directory(str(tmp_path / "missing"))


@pytest.mark.parametrize("count", [0, 1, 4096, 10000])
def test_create_file_with_size(tmp_path, count):
    file_path = tmp_path / "random.bin"
    create_file_with_size(str(file_path), count)
    assert size(str(file_path)) == count
    data = file_path.read_bytes()
    assert all(32 <= byte <= 126 for byte in data)