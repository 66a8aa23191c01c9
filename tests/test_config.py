# This project was developed with assistance from AI tools.
"""Tests for environment-driven settings."""

from problem_details.core.config import Settings


def test_env_file_read_from_working_directory(tmp_path, monkeypatch):
    """A .env in the process working directory is picked up."""
    monkeypatch.delenv("INCLUDE_ERROR_DETAIL", raising=False)
    monkeypatch.delenv("PROBLEM_DETAILS_EXCLUDE_PATHS", raising=False)
    (tmp_path / ".env").write_text(
        'INCLUDE_ERROR_DETAIL=true\nPROBLEM_DETAILS_EXCLUDE_PATHS=["/raw"]\n', encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)

    config = Settings()

    assert config.INCLUDE_ERROR_DETAIL is True
    assert config.PROBLEM_DETAILS_EXCLUDE_PATHS == ["/raw"]


def test_defaults_without_env_file(tmp_path, monkeypatch):
    """Without a .env the defaults include every path and hide error detail."""
    for name in ("INCLUDE_ERROR_DETAIL", "PROBLEM_DETAILS_INCLUDE_PATHS", "PROBLEM_DETAILS_EXCLUDE_PATHS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    config = Settings()

    assert config.PROBLEM_DETAILS_INCLUDE_PATHS == ["/"]
    assert config.PROBLEM_DETAILS_EXCLUDE_PATHS == []
    assert config.INCLUDE_ERROR_DETAIL is False
