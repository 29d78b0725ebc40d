"""Tests for YAML data loading and its failure handling."""

import logging

from chipsite.data.loader import load_sequence, load_yaml

from .conftest import write_site


class TestLoadYaml:
    """Tests for load_yaml."""

    def test_loads_document(self, tmp_path):
        data_dir = write_site(tmp_path, {"series.yml": "- id: m\n- id: a\n"})
        assert load_yaml("series.yml", data_dir) == [{"id": "m"}, {"id": "a"}]

    def test_loads_mapping(self, tmp_path):
        data_dir = write_site(tmp_path, {"specs.yml": "groups: []\n"})
        assert load_yaml("specs.yml", data_dir) == {"groups": []}

    def test_missing_file_is_empty_list(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR, logger="chipsite.data.loader"):
            assert load_yaml("nope.yml", tmp_path) == []
        assert "Error loading YAML: nope.yml" in caplog.text

    def test_malformed_file_is_empty_list(self, tmp_path, caplog):
        data_dir = write_site(tmp_path, {"bad.yml": "- id: [unclosed\n"})
        with caplog.at_level(logging.ERROR, logger="chipsite.data.loader"):
            assert load_yaml("bad.yml", data_dir) == []
        assert "bad.yml" in caplog.text

    def test_empty_document_is_empty_list(self, tmp_path):
        data_dir = write_site(tmp_path, {"empty.yml": ""})
        assert load_yaml("empty.yml", data_dir) == []


class TestLoadSequence:
    """Tests for load_sequence."""

    def test_mapping_rejected(self, tmp_path, caplog):
        data_dir = write_site(tmp_path, {"devices.yml": "id: one\n"})
        with caplog.at_level(logging.WARNING, logger="chipsite.data.loader"):
            assert load_sequence("devices.yml", data_dir) == []
        assert "Expected a list in devices.yml, got dict" in caplog.text

    def test_list_passes_through(self, tmp_path):
        data_dir = write_site(tmp_path, {"devices.yml": "- id: one\n"})
        assert load_sequence("devices.yml", data_dir) == [{"id": "one"}]
