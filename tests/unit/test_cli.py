"""Tests for the fusion CLI."""

import json

import pytest
from typer.testing import CliRunner

from oncofusion import __version__
from oncofusion.cli import app, build_config
from oncofusion.config.debug import reset_logger
from oncofusion.models import FusionPair, PromiscuousGene


runner = CliRunner()


@pytest.fixture(autouse=True)
def fresh_logger():
    reset_logger()
    yield
    reset_logger()


class TestReadCommand:
    """Tests for 'fusion read' command."""

    def test_read_pair_json(self):
        result = runner.invoke(app, ["read", "ABL1", "BCR-ABL1", "--format", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"event_type": "fusion_pair", "five_gene": "BCR", "three_gene": "ABL1"}

    def test_read_promiscuous_json(self):
        result = runner.invoke(app, ["read", "NTRK1", "NTRK1 fusion", "-f", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"event_type": "promiscuous_gene", "gene": "NTRK1"}

    def test_read_with_separators(self):
        result = runner.invoke(app, ["read", "FOO", "FOO_BAR", "-s", "-", "-s", "_", "-f", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["three_gene"] == "BAR"

    def test_read_flip(self):
        result = runner.invoke(app, ["read", "ALK", "EML4-ALK", "--flip", "EML4:ALK", "-f", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"event_type": "fusion_pair", "five_gene": "ALK", "three_gene": "EML4"}

    def test_read_filtered_json(self):
        result = runner.invoke(app, ["read", "ALK", "EML4-ALK", "--filter-pair", "EML4:ALK", "-f", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) is None

    def test_read_filtered_table(self):
        result = runner.invoke(app, ["read", "NTRK1", "NTRK1 fusion", "--filter-gene", "NTRK1"])

        assert result.exit_code == 0
        assert "filtered" in result.stdout

    def test_read_table(self):
        result = runner.invoke(app, ["read", "ABL1", "BCR-ABL1"])

        assert result.exit_code == 0
        assert "Fusion pair" in result.stdout
        assert "BCR" in result.stdout

    def test_read_tsv(self):
        result = runner.invoke(
            app, ["read", "ALK", "EML4-ALK", "-f", "tsv", "--transcript", "ENST00000389048", "--info", "oncokb"]
        )

        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert lines[0].split("\t") == ["gene", "transcript", "info", "five_gene", "three_gene"]
        assert lines[1].split("\t") == ["ALK", "ENST00000389048", "oncokb", "EML4", "ALK"]

    def test_read_with_config_file(self, reader_config_file):
        result = runner.invoke(app, ["read", "BCR", "ABL1-BCR", "--config", str(reader_config_file), "-f", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["five_gene"] == "BCR"

    def test_read_with_config_from_env(self, monkeypatch, reader_config_file):
        monkeypatch.setenv("ONCOFUSION_READER_CONFIG", str(reader_config_file))
        result = runner.invoke(app, ["read", "IGH", "IGH rearrangement", "-f", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) is None

    def test_read_invalid_flip_argument(self):
        result = runner.invoke(app, ["read", "ALK", "EML4-ALK", "--flip", "EML4"])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_read_empty_gene(self):
        result = runner.invoke(app, ["read", " ", "EML4-ALK"])

        assert result.exit_code == 1

    def test_read_missing_config_file(self, tmp_path):
        result = runner.invoke(app, ["read", "ALK", "EML4-ALK", "--config", str(tmp_path / "missing.json")])

        assert result.exit_code == 1


class TestVersionCommand:
    """Tests for 'fusion version' command."""

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert result.stdout.strip() == __version__


class TestBuildConfig:
    """Tests for merging file and command-line configuration."""

    def test_defaults(self):
        config = build_config(None, None, None, None, None)
        assert config.separators == ("-",)

    def test_command_line_added_to_file(self, reader_config_file):
        config = build_config(reader_config_file, None, ["KIF5B:RET"], ["ALK"], ["EML4:ALK"])

        assert config.separators == ("-", "_")
        assert FusionPair(five_gene="KIF5B", three_gene="RET") in config.filter_set
        assert PromiscuousGene(gene="ALK") in config.filter_set
        assert PromiscuousGene(gene="IGH") in config.filter_set
        assert FusionPair(five_gene="EML4", three_gene="ALK") in config.flip_set
        assert FusionPair(five_gene="ABL1", three_gene="BCR") in config.flip_set

    def test_command_line_separators_replace_file(self, reader_config_file):
        config = build_config(reader_config_file, ["_"], None, None, None)
        assert config.separators == ("_",)


class TestLogLevelOption:
    """Tests for the --log-level option."""

    def test_invalid_log_level_reported(self):
        result = runner.invoke(app, ["read", "ABL1", "BCR-ABL1", "--log-level", "LOUD"])

        assert result.exit_code == 1
        assert "Invalid log level" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_debug_log_level_reports_separators(self):
        result = runner.invoke(app, ["read", "ABL1", "BCR-ABL1", "-s", "-", "-s", "_", "--log-level", "DEBUG"])

        assert result.exit_code == 0
        assert "Separator '_' on 'BCR-ABL1' for ABL1" in result.output
