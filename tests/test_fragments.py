import json
from pathlib import Path

import pytest

from swagger_composer.parser.fragments import read_fragment, sidecar_path, sidecar_paths

FIXTURES = Path(__file__).parent / "fixtures"


class TestSidecarPaths:
    def test_replaces_module_extension(self):
        assert sidecar_path(Path("routes/http/pdf.py"), "body") == Path("routes/http/pdf.body.json")

    def test_all_kinds(self):
        paths = sidecar_paths(Path("routes/pdf.py"))
        assert paths == {
            "body": Path("routes/pdf.body.json"),
            "query": Path("routes/pdf.query.json"),
            "response": Path("routes/pdf.response.json"),
        }

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            sidecar_path(Path("routes/pdf.py"), "headers")


class TestReadFragment:
    def test_reads_existing_fragment(self):
        fragment = read_fragment(FIXTURES / "routes" / "http" / "pdf.query.json")
        assert fragment["required"] == ["token"]
        assert set(fragment["properties"]) == {"timeout", "token", "blockAds"}

    def test_missing_file_is_none(self, tmp_path):
        assert read_fragment(tmp_path / "nope.body.json") is None

    def test_none_path_is_none(self):
        assert read_fragment(None) is None

    def test_json_null_is_none(self, tmp_path):
        f = tmp_path / "route.body.json"
        f.write_text("null")
        assert read_fragment(f) is None

    def test_malformed_json_propagates(self, tmp_path):
        f = tmp_path / "route.body.json"
        f.write_text("{not json")
        with pytest.raises(json.JSONDecodeError):
            read_fragment(f)
