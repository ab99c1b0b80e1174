"""
Shared fixtures for classification tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'uniqfiles' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for classification scenarios:
    - 3 identical files (1KB of 'A'), one of them in a subdirectory
    - 1 file with the same size but different content (1KB of 'Z')
    - 2 identical files (2KB of 'B')
    - 2 files with sizes nobody else has
    """
    files = {}

    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["dup1_sub"] = subdir / "dup_in_subdir.txt"
    files["dup1_sub"].write_bytes(content_a)

    # Same size as dup1_*, different content: must be hashed, ends up unique
    files["same_size"] = temp_dir / "same_size.txt"
    files["same_size"].write_bytes(b"Z" * 1024)

    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.txt"
    files["dup2_b"] = temp_dir / "dup2_b.txt"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    files["unique1"] = temp_dir / "unique1.txt"
    files["unique1"].write_bytes(b"C" * 1500)
    files["unique2"] = temp_dir / "unique2.txt"
    files["unique2"].write_bytes(b"D" * 2500)

    return files


@pytest.fixture
def abc_files(temp_dir) -> Dict[str, str]:
    """A='x', B='y', C='x', the classic uniq example."""
    paths = {}
    for name, content in (("A", b"x"), ("B", b"y"), ("C", b"x")):
        path = temp_dir / name
        path.write_bytes(content)
        paths[name] = str(path)
    return paths


@pytest.fixture
def ordered_paths(test_files) -> list:
    """Paths of the test_files fixture in a fixed input order."""
    keys = ["dup1_a", "dup1_b", "dup1_sub", "same_size", "dup2_a", "dup2_b", "unique1", "unique2"]
    return [str(test_files[k]) for k in keys]
