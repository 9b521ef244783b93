"""
Integration tests for the jcrlex command line.
"""

import pytest
from click.testing import CliRunner

from jcr_lexicon.cli.cli import cli


@pytest.fixture
def runner(monkeypatch):
    for var in ("JCRLEX_NAMESPACES_FILE", "JCRLEX_INCLUDE_BUILTIN_NAMESPACES", "JCRLEX_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return CliRunner()


class TestName:

    def test_valid(self, runner):
        result = runner.invoke(cli, ["name", "jcr:primaryType", "title"])
        assert result.exit_code == 0
        assert "valid" in result.output

    def test_unregistered_prefix(self, runner):
        result = runner.invoke(cli, ["name", "jcr:content", "foo:bar"])
        assert result.exit_code == 1
        assert "foo" in result.output

    def test_without_builtins(self, runner):
        result = runner.invoke(cli, ["--no-builtins", "name", "jcr:content"])
        assert result.exit_code == 1


class TestPath:

    def test_valid(self, runner):
        result = runner.invoke(cli, ["path", "/", "/jcr:root/nt:file[2]"])
        assert result.exit_code == 0

    def test_reports_failing_segment(self, runner):
        result = runner.invoke(cli, ["path", "/a//b"])
        assert result.exit_code == 1
        assert "segment 2" in result.output

    def test_custom_namespaces(self, runner, write_namespace_file):
        path = write_namespace_file("<app = 'urn:app'>")
        result = runner.invoke(cli, ["--namespaces", str(path), "path", "/app:content"])
        assert result.exit_code == 0

    def test_broken_namespace_file(self, runner, write_namespace_file):
        path = write_namespace_file("<1app = 'urn:app'>")
        result = runner.invoke(cli, ["--namespaces", str(path), "path", "/a"])
        assert result.exit_code == 1
        assert "Cannot load namespaces" in result.output


class TestDate:

    def test_valid(self, runner):
        result = runner.invoke(cli, ["date", "2024-03-15T10:30:00.000Z"])
        assert result.exit_code == 0

    def test_invalid(self, runner):
        result = runner.invoke(cli, ["date", "2024-03-15T10:30:00.000Z", "2024-13-01T00:00:00.000Z"])
        assert result.exit_code == 1
        assert "invalid" in result.output


class TestNamespaces:

    def test_lists_builtins(self, runner):
        result = runner.invoke(cli, ["namespaces"])
        assert result.exit_code == 0
        for prefix in ("jcr", "nt", "mix", "xml", "sv"):
            assert prefix in result.output

    def test_check_valid_file(self, runner, write_namespace_file, valid_cnd):
        path = write_namespace_file(valid_cnd)
        result = runner.invoke(cli, ["check-namespaces", str(path)])
        assert result.exit_code == 0
        assert "3 declaration(s)" in result.output

    def test_check_invalid_file(self, runner, write_namespace_file):
        path = write_namespace_file("<a = 'urn:x'>\n<b = 'urn:x'>")
        result = runner.invoke(cli, ["check-namespaces", str(path)])
        assert result.exit_code == 1
        assert "Validation failed" in result.output

    def test_check_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["check-namespaces", str(tmp_path / "none.cnd")])
        assert result.exit_code == 1
