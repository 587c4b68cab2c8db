"""Packaging correctness verification for json-rule-diff.

Tests validate:
- Top-level import exposes the public API
- py.typed marker is present in the source tree and the wheel
- Package metadata is correct

These tests inspect the built wheel and the source tree rather than creating
temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

import subprocess
import tomllib
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent
PACKAGE_ROOT = PROJECT_ROOT / "src" / "json_rule_diff"


class TestImport:
    """Verify the top-level package exposes the public API."""

    def test_import_json_rule_diff(self) -> None:
        import json_rule_diff

        assert callable(json_rule_diff.diff)
        assert callable(json_rule_diff.verify)
        assert callable(json_rule_diff.load_yaml)

    def test_version_matches_pyproject(self) -> None:
        import json_rule_diff

        with (PROJECT_ROOT / "pyproject.toml").open("rb") as f:
            pyproject = tomllib.load(f)
        assert json_rule_diff.__version__ == pyproject["project"]["version"]

    def test_py_typed_in_source(self) -> None:
        assert (PACKAGE_ROOT / "py.typed").is_file()


class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self) -> Path:
        """Build a fresh wheel and return its path."""
        dist_dir = PROJECT_ROOT / "dist"
        try:
            result = subprocess.run(
                ["poetry", "build", "-f", "wheel"],
                cwd=str(PROJECT_ROOT),
                capture_output=True,
                text=True,
            )
        except FileNotFoundError:
            pytest.skip("poetry is not installed")
        if result.returncode != 0:
            pytest.skip(f"poetry build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("*.whl"), key=lambda p: p.stat().st_mtime)
        if not wheels:
            pytest.skip("No wheel found in dist/")
        return wheels[-1]

    def test_py_typed_in_wheel(self, wheel_path: Path) -> None:
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            assert any(n.endswith("py.typed") for n in names), names

    def test_all_source_modules_in_wheel(self, wheel_path: Path) -> None:
        expected_modules = sorted(
            str(path.relative_to(PACKAGE_ROOT.parent))
            for path in PACKAGE_ROOT.rglob("*.py")
        )
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            for module in expected_modules:
                assert any(module in n for n in names), (
                    f"Module {module} not found in wheel"
                )

    def test_metadata_in_wheel(self, wheel_path: Path) -> None:
        with zipfile.ZipFile(wheel_path) as zf:
            metadata_files = [n for n in zf.namelist() if "METADATA" in n]
            assert metadata_files, "No METADATA found in wheel"
            metadata = zf.read(metadata_files[0]).decode()
            assert "json-rule-diff" in metadata.lower()
            assert "0.1.0" in metadata
