"""Pytest configuration and fixtures."""

import json

import pytest


@pytest.fixture
def eml4_alk():
    """The EML4-ALK fusion pair."""
    from oncofusion.models import FusionPair

    return FusionPair(five_gene="EML4", three_gene="ALK")


@pytest.fixture
def reader_config_file(tmp_path):
    """A JSON reader configuration on disk."""
    path = tmp_path / "reader.json"
    path.write_text(json.dumps({
        "separators": ["-", "_"],
        "filter_set": [
            {"event_type": "promiscuous_gene", "gene": "IGH"},
            {"event_type": "fusion_pair", "five_gene": "PVT1", "three_gene": "MYC"},
        ],
        "flip_set": [
            {"five_gene": "ABL1", "three_gene": "BCR"},
        ],
    }))
    return path


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep user configuration out of the tests."""
    monkeypatch.delenv("ONCOFUSION_READER_CONFIG", raising=False)
    monkeypatch.delenv("ONCOFUSION_LOG_LEVEL", raising=False)
