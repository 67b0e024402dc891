"""
Tests for the repository configuration cache.
"""

import json
import pytest
from unittest.mock import patch

from srclibkit.core.exceptions import RepoError
from srclibkit.repo.config_store import (
    RepositoryConfig,
    get_config_file,
    new_job_context,
    read_or_compute_repository_config,
    read_srcfile_config,
    write_repository_config,
)
from srclibkit.repo.context import RepoContext

COMMIT = "0123456789abcdef"
URI = "github.com/org/repo"


class TestRepositoryConfig:
    """Test RepositoryConfig serialization."""

    def test_to_dict_keys(self):
        config = RepositoryConfig(uri=URI, scan_ignore=["vendor"])

        assert config.to_dict() == {
            "URI": URI,
            "SourceUnits": [],
            "ScanIgnore": ["vendor"],
            "Config": {},
        }

    def test_from_dict_defaults(self):
        config = RepositoryConfig.from_dict({"URI": URI})

        assert config.uri == URI
        assert config.source_units == []
        assert config.config == {}

    def test_from_dict_tolerates_nulls(self):
        config = RepositoryConfig.from_dict({"URI": None, "SourceUnits": None})

        assert config.uri == ""
        assert config.source_units == []

    def test_from_dict_rejects_non_object(self):
        with pytest.raises(RepoError):
            RepositoryConfig.from_dict(["not", "an", "object"])


class TestGetConfigFile:
    def test_location(self, tmp_path):
        assert get_config_file(tmp_path, COMMIT) == (
            tmp_path / ".srclib-cache" / COMMIT / "config.json"
        )

    def test_requires_repo_dir(self):
        with pytest.raises(RepoError):
            get_config_file("", COMMIT)

    def test_requires_commit(self, tmp_path):
        with pytest.raises(RepoError):
            get_config_file(tmp_path, "")


class TestReadOrCompute:
    """Test read_or_compute_repository_config."""

    def test_computes_empty_config(self, tmp_path):
        config = read_or_compute_repository_config(tmp_path, COMMIT, URI)

        assert config == RepositoryConfig(uri=URI)

    def test_computes_from_srcfile(self, tmp_path):
        (tmp_path / "Srcfile").write_text(
            json.dumps({"URI": "ignored", "ScanIgnore": ["third_party"]})
        )

        config = read_or_compute_repository_config(tmp_path, COMMIT, URI)

        assert config.uri == URI
        assert config.scan_ignore == ["third_party"]

    def test_invalid_srcfile(self, tmp_path):
        (tmp_path / "Srcfile").write_text("{not json")

        with pytest.raises(RepoError):
            read_srcfile_config(tmp_path, URI)

    def test_custom_compute(self, tmp_path):
        calls = []

        def compute(repo_dir, uri):
            calls.append((repo_dir, uri))
            return RepositoryConfig(uri=uri, config={"scanned": True})

        config = read_or_compute_repository_config(tmp_path, COMMIT, URI, compute)

        assert calls == [(tmp_path, URI)]
        assert config.config == {"scanned": True}

    def test_reads_cache_instead_of_computing(self, tmp_path):
        write_repository_config(tmp_path, COMMIT, RepositoryConfig(uri="cached"))

        def compute(repo_dir, uri):
            raise AssertionError("should not compute")

        config = read_or_compute_repository_config(tmp_path, COMMIT, URI, compute)

        assert config.uri == "cached"


class TestWriteRepositoryConfig:
    """Test write_repository_config."""

    def test_writes_json(self, tmp_path):
        assert write_repository_config(tmp_path, COMMIT, RepositoryConfig(uri=URI))

        data = json.loads(get_config_file(tmp_path, COMMIT).read_text())
        assert data["URI"] == URI

    def test_keeps_existing_without_overwrite(self, tmp_path):
        write_repository_config(tmp_path, COMMIT, RepositoryConfig(uri="first"))

        written = write_repository_config(tmp_path, COMMIT, RepositoryConfig(uri="second"))

        assert written is False
        assert read_or_compute_repository_config(tmp_path, COMMIT, URI).uri == "first"

    def test_overwrite(self, tmp_path):
        write_repository_config(tmp_path, COMMIT, RepositoryConfig(uri="first"))

        written = write_repository_config(
            tmp_path, COMMIT, RepositoryConfig(uri="second"), overwrite=True
        )

        assert written is True
        assert read_or_compute_repository_config(tmp_path, COMMIT, URI).uri == "second"


class TestNewJobContext:
    def test_combines_context_and_config(self, tmp_path):
        repo = RepoContext(tmp_path, "git", COMMIT, f"https://{URI}")

        with patch("srclibkit.repo.config_store.detect_repo_context", return_value=repo):
            job = new_job_context(tmp_path)

        assert job.repo is repo
        assert job.config.uri == URI
