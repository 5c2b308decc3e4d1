"""Test fixtures for integration and unit tests."""

import shutil
from pathlib import Path

_FIXTURES_DIR = Path(__file__).parent


def fixture_path(*parts: str) -> Path:
    """Resolve a path relative to the test/fixtures/ directory."""
    return _FIXTURES_DIR.joinpath(*parts)


def copy_storage_fixture(name: str, target_dir: Path) -> Path:
    """Copy a storage file into ``target_dir``.

    Loading deletes sibling files, so fixtures are never loaded in place.
    """
    target_dir.mkdir(parents=True, exist_ok=True)
    target = target_dir / "internships.txt"
    shutil.copyfile(fixture_path("storage", name), target)
    return target
