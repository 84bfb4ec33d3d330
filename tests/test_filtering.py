"""Tests for file eligibility filtering."""

import pytest
from pathlib import Path, PurePosixPath
from json_minifier.filtering import should_minify, SKIPPED_FILENAMES, SKIPPED_SUFFIXES


class TestShouldMinify:
    """Tests for should_minify."""

    @pytest.mark.parametrize("path", [
        "data/users.json",
        "api/response.json",
        "config/settings.json",
        "lock/data.json",
        "package.json.bak",
        "my-package.json",
    ])
    def test_data_files_are_minified(self, path):
        """Test that ordinary JSON files are minified."""
        assert should_minify(path)

    @pytest.mark.parametrize("path", [
        "package.json",
        "frontend/package.json",
        "tsconfig.json",
        "frontend/tsconfig.json",
    ])
    def test_config_files_are_skipped(self, path):
        """Test that reserved configuration files are skipped."""
        assert not should_minify(path)

    @pytest.mark.parametrize("path", [
        "package-lock.json",
        "composer-lock.json",
        "composer.lock.json",
        "dependencies.lock.json",
        "deep/nested/dir/app.lock.json",
    ])
    def test_lock_files_are_skipped(self, path):
        """Test that lock files are skipped."""
        assert not should_minify(path)

    def test_matching_is_case_sensitive(self):
        """Test that filename matching is case-sensitive."""
        assert should_minify("Package.json")
        assert should_minify("TSCONFIG.JSON")
        assert should_minify("package-LOCK.json")

    def test_accepts_path_objects(self):
        """Test that path-like objects are accepted."""
        assert not should_minify(Path("web") / "package.json")
        assert should_minify(PurePosixPath("web/data.json"))

    def test_is_repeatable(self):
        """Test that identical input gives identical results."""
        results = {should_minify("package-lock.json") for _ in range(5)}
        assert results == {False}

    def test_rule_constants(self):
        """Test the published skip rules."""
        assert SKIPPED_FILENAMES == {"package.json", "tsconfig.json"}
        assert set(SKIPPED_SUFFIXES) == {"-lock.json", ".lock.json"}
