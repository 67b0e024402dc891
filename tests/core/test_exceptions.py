"""
Tests for the exception hierarchy.
"""

from pathlib import Path

from srclibkit.core.exceptions import (
    ConfigurationError,
    InvalidInstallError,
    RepoError,
    RepoNotFoundError,
    SrclibError,
    ToolchainError,
    ToolchainIOError,
    ToolchainNotFoundError,
    ToolchainShadowedError,
    VCSCommandError,
)


class TestHierarchy:
    """Test callers can catch by category."""

    def test_toolchain_errors(self):
        for exc in (
            ToolchainNotFoundError("a"),
            ToolchainShadowedError("a", ["/x", "/y"]),
            InvalidInstallError("/x/.bin/a"),
            ToolchainIOError("/x", "boom"),
        ):
            assert isinstance(exc, ToolchainError)
            assert isinstance(exc, SrclibError)

    def test_other_errors(self):
        assert issubclass(ConfigurationError, SrclibError)
        assert issubclass(RepoNotFoundError, RepoError)
        assert issubclass(VCSCommandError, RepoError)

    def test_categories_are_distinct(self):
        assert not issubclass(ToolchainNotFoundError, ToolchainShadowedError)
        assert not issubclass(ToolchainShadowedError, ToolchainNotFoundError)
        assert not issubclass(ToolchainIOError, ToolchainNotFoundError)


class TestMessages:
    """Test error attributes and messages."""

    def test_not_found(self):
        exc = ToolchainNotFoundError("a/b", ["/x", "/y"])

        assert exc.name == "a/b"
        assert str(exc) == "Toolchain not found: a/b (searched: /x:/y)"

    def test_shadowed(self):
        exc = ToolchainShadowedError("a", [Path("/x/a"), "/y/a"])

        assert exc.directories == ["/x/a", "/y/a"]
        assert "/x/a, /y/a" in str(exc)

    def test_invalid_install(self):
        exc = InvalidInstallError("/x/.bin/a")

        assert exc.program == Path("/x/.bin/a")
        assert "not executable" in str(exc)

    def test_vcs_command(self):
        exc = VCSCommandError(["git", "rev-parse", "HEAD"], "fatal")

        assert str(exc) == "Command 'git rev-parse HEAD' failed: fatal"
