"""Pytest configuration: synthetic module files and optional external ones."""

import os
from pathlib import Path
from typing import Optional

import pytest

from modmsg_charset.core.constants import MODULE_EXTENSIONS


def build_it(message: bytes = b"", title: bytes = b"Test Song", attach: bool = True) -> bytes:
    """Build a minimal Impulse Tracker file with a song message."""
    header = bytearray(0xC0)
    header[0:4] = b"IMPM"
    header[4:4 + len(title)] = title
    if attach and message:
        header[0x2E:0x30] = (1).to_bytes(2, "little")
        header[0x36:0x38] = (len(message) + 1).to_bytes(2, "little")
        header[0x38:0x3C] = (0xC0).to_bytes(4, "little")
    return bytes(header) + message + b"\x00"


def build_mtm(lines: list[bytes], title: bytes = b"Test Song") -> bytes:
    """Build a minimal MultiTracker file with one pattern and no samples."""
    comment = b"".join(line.ljust(40, b"\x00") for line in lines)
    header = bytearray(66)
    header[0:4] = b"MTM\x10"
    header[4:4 + len(title)] = title
    header[28:30] = len(comment).to_bytes(2, "little")
    # order table, no tracks, one pattern of 32 track references
    body = bytes(128) + bytes(64)
    return bytes(header) + body + comment


def build_669(lines: list[bytes], signature: bytes = b"if") -> bytes:
    """Build a minimal Composer 669 header with a three-line message."""
    message = b"".join(line.ljust(36, b"\x00") for line in lines).ljust(108, b"\x00")
    data = signature + message
    return data + bytes(0x1F1 - len(data))


@pytest.fixture
def module_dir(tmp_path: Path) -> Path:
    """Directory holding one module of each supported format."""
    (tmp_path / "ibm.it").write_bytes(build_it(b"Greetings\r\x90t\x82 \xb0\xb1\xb2"))
    (tmp_path / "plain.mtm").write_bytes(build_mtm([b"just ascii"]))
    (tmp_path / "old.669").write_bytes(build_669([b"caf\x82", b"", b"bye"]))
    (tmp_path / "notes.txt").write_text("not a module")
    return tmp_path


def get_test_module_dir() -> Optional[Path]:
    """
    Get external module directory from the environment.

    Set MODMSG_CHARSET_TEST_DIR to a directory of real module files to run
    the external tests.
    """
    if env_path := os.environ.get("MODMSG_CHARSET_TEST_DIR"):
        path = Path(env_path).expanduser()
        if path.exists():
            return path
    return None


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Generate test cases from external module files."""
    if "module_file" in metafunc.fixturenames:
        module_dir = get_test_module_dir()
        files = []
        if module_dir:
            files = sorted(
                f for f in module_dir.iterdir()
                if f.suffix.lower() in MODULE_EXTENSIONS
            )[:50]
        metafunc.parametrize("module_file", files, ids=lambda p: p.name)
