# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import bz2
import gzip
import io
import tarfile
import zipfile
from pathlib import Path

import pytest

TEST_MESSAGE = "Hello, World!\nThis is a test file.\n"

TAR_ARCHIVE_CONTENT: tuple[tuple[str, str], ...] = (
    ("file1.txt", "Content of file 1"),
    ("file2.txt", "Content of file 2"),
)

ZIP_TEST_FILES: tuple[tuple[str, str], ...] = (
    (
        "document.txt",
        "This is a plain text file.\nIt has multiple lines.\nTest content here.",
    ),
    (
        "readme.md",
        "# Test Document\n## Section 1\n"
        "This is a markdown file with **bold** and *italic* text.\n\n"
        "- List item 1\n- List item 2",
    ),
    ("data.csv", "id,name,value\n1,item1,100\n2,item2,200\n3,item3,300"),
    (
        "config.json",
        '{\n  "name": "test",\n  "version": "1.0.0",\n'
        '  "settings": {\n    "enabled": true,\n    "timeout": 30\n  }\n}',
    ),
    (
        "data.xml",
        '<?xml version="1.0" encoding="UTF-8"?>\n<root>\n  <item id="1">\n'
        "    <name>Test Item</name>\n    <value>100</value>\n  </item>\n</root>",
    ),
    (
        "config.xml",
        '<?xml version="1.0" encoding="UTF-8"?>\n<!DOCTYPE configuration>\n'
        '<configuration>\n  <settings>\n    <setting name="timeout" value="30"/>\n'
        "  </settings>\n</configuration>",
    ),
)

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR" + b"\x00" * 64
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00" + b"\x00" * 64


def write_tar(fileobj, files) -> None:
    """Write *files* (name, text) as a TAR archive into *fileobj*."""
    with tarfile.open(fileobj=fileobj, mode="w") as tar:
        for name, content in files:
            data = content.encode()
            info = tarfile.TarInfo(name)
            info.size = len(data)
            info.mode = 0o644
            tar.addfile(info, io.BytesIO(data))


@pytest.fixture()
def sample_tar(tmp_path: Path) -> Path:
    path = tmp_path / "archive.tar"
    with path.open("wb") as f:
        write_tar(f, TAR_ARCHIVE_CONTENT)
    return path


@pytest.fixture()
def sample_tar_gz(tmp_path: Path) -> Path:
    path = tmp_path / "archive.tar.gz"
    with gzip.open(path, "wb") as f:
        write_tar(f, TAR_ARCHIVE_CONTENT)
    return path


@pytest.fixture()
def sample_tgz(tmp_path: Path) -> Path:
    path = tmp_path / "archive.tgz"
    with gzip.open(path, "wb") as f:
        write_tar(f, TAR_ARCHIVE_CONTENT)
    return path


@pytest.fixture()
def sample_tar_bz2(tmp_path: Path) -> Path:
    path = tmp_path / "archive.tar.bz2"
    with bz2.open(path, "wb") as f:
        write_tar(f, TAR_ARCHIVE_CONTENT)
    return path


@pytest.fixture()
def sample_gz(tmp_path: Path) -> Path:
    path = tmp_path / "text.txt.gz"
    path.write_bytes(gzip.compress(TEST_MESSAGE.encode()))
    return path


@pytest.fixture()
def sample_bz2(tmp_path: Path) -> Path:
    path = tmp_path / "text.txt.bz2"
    path.write_bytes(bz2.compress(TEST_MESSAGE.encode()))
    return path


@pytest.fixture()
def sample_zip(tmp_path: Path) -> Path:
    path = tmp_path / "files.zip"
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, content in ZIP_TEST_FILES:
            zf.writestr(name, content)
    return path


@pytest.fixture()
def nested_zip(tmp_path: Path) -> Path:
    path = tmp_path / "nested.zip"
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("root_file.txt", "Root level file")
        zf.writestr(zipfile.ZipInfo("empty_dir/"), "")
        zf.writestr(zipfile.ZipInfo("nested/"), "")
        zf.writestr("nested/nested_file.txt", "Nested file content")
    return path


@pytest.fixture()
def binary_zip(tmp_path: Path) -> Path:
    path = tmp_path / "binary.zip"
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("image.png", PNG_BYTES)
        zf.writestr("photo.jpg", JPEG_BYTES)
        zf.writestr("data.gz", gzip.compress(b"compressed payload"))
    return path


@pytest.fixture()
def text_file(tmp_path: Path) -> Path:
    path = tmp_path / "text.txt"
    path.write_text(TEST_MESSAGE, encoding="utf-8")
    return path
