"""Unit tests for descriptor path resolution."""

from pathlib import Path

import pytest
from lunchctl.errors import HomeDirectoryError
from lunchctl.paths import PathResolver


class TestPathResolver:
    """Tests for PathResolver class."""

    def test_path_for_explicit_home(self):
        """Test path is <home>/Library/LaunchAgents/<label>.plist."""
        resolver = PathResolver(home="/Users/x")

        assert resolver.path_for("co.myrt.ajam") == Path(
            "/Users/x/Library/LaunchAgents/co.myrt.ajam.plist"
        )

    @pytest.mark.parametrize("label", ["test", "co.example.test", "com.example.daemon"])
    def test_path_for_reads_home_from_environ(self, label):
        """Test HOME is read from the injected environment."""
        resolver = PathResolver(environ={"HOME": "/Users/someone"})

        expected = Path("/Users/someone") / "Library" / "LaunchAgents" / f"{label}.plist"
        assert resolver.path_for(label) == expected

    def test_same_label_same_path(self):
        """Test two lookups of one label collide."""
        resolver = PathResolver(home="/Users/x")

        assert resolver.path_for("dup") == resolver.path_for("dup")

    def test_default_uses_process_environment(self, monkeypatch, tmp_path):
        """Test the default resolver follows the HOME environment variable."""
        monkeypatch.setenv("HOME", str(tmp_path))

        assert PathResolver().path_for("test") == (
            tmp_path / "Library" / "LaunchAgents" / "test.plist"
        )

    def test_missing_home(self):
        """Test an unset HOME raises HomeDirectoryError."""
        resolver = PathResolver(environ={})

        with pytest.raises(HomeDirectoryError):
            resolver.path_for("test")

    def test_empty_home(self):
        """Test an empty HOME raises HomeDirectoryError."""
        resolver = PathResolver(environ={"HOME": ""})

        with pytest.raises(HomeDirectoryError):
            resolver.launch_agents_dir()

    def test_label_not_sanitized(self):
        """Test labels are used verbatim."""
        resolver = PathResolver(home="/Users/x")

        assert resolver.path_for("a b'c").name == "a b'c.plist"

    def test_label_for(self):
        """Test recovering a label from a descriptor path."""
        resolver = PathResolver(home="/Users/x")

        assert resolver.label_for(Path("/tmp/co.example.test.plist")) == "co.example.test"
        assert resolver.label_for(Path("/tmp/notes.txt")) is None
