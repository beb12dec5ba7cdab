"""Unit tests for YAML/TOML/JSON config loading."""

import json
import pytest
from unittest.mock import patch

from pgoid import ConfigError, TypeCache
from pgoid.config import cache_from_config, load_config, prefetch_from_config


class TestLoadConfig:
    def test_json_loading(self, tmp_path):
        config = {"prefetch": ["int4", "text"]}
        f = tmp_path / "test.json"
        f.write_text(json.dumps(config))
        result = load_config(f)
        assert result == config

    def test_toml_loading(self, tmp_path):
        toml_content = 'prefetch = ["int4", "text"]\n'
        f = tmp_path / "test.toml"
        f.write_text(toml_content)
        try:
            result = load_config(f)
            assert result['prefetch'] == ['int4', 'text']
        except ImportError:
            pytest.skip("No TOML library available")

    def test_yaml_loading(self, tmp_path):
        yaml_content = "prefetch:\n  - int4\n  - text\n"
        f = tmp_path / "test.yaml"
        f.write_text(yaml_content)
        try:
            result = load_config(f)
            assert result['prefetch'] == ['int4', 'text']
        except ImportError:
            pytest.skip("pyyaml not installed")

    def test_unknown_extension_raises(self, tmp_path):
        f = tmp_path / "test.xml"
        f.write_text("<config></config>")
        with pytest.raises(ValueError, match="Unsupported config file extension"):
            load_config(f)

    def test_missing_file_raises(self):
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/path/config.json")

    def test_yaml_missing_dep_message(self, tmp_path):
        f = tmp_path / "test.yml"
        f.write_text("prefetch: []\n")
        with patch.dict('sys.modules', {'yaml': None}):
            with pytest.raises(ImportError, match="pyyaml"):
                load_config(f)


class TestPrefetchFromConfig:
    def test_absent_key(self):
        assert prefetch_from_config({}) is None

    def test_known_names(self, codecs):
        assert prefetch_from_config({"prefetch": ["int4", "hstore"]}, codecs) == ["int4", "hstore"]

    def test_registered_extension_name(self, codecs):
        codecs.register('EnumCodec', ['mood'])
        assert prefetch_from_config({"prefetch": ["mood"]}, codecs) == ["mood"]

    def test_unknown_name_raises(self, codecs):
        with pytest.raises(ConfigError, match="no_such_type"):
            prefetch_from_config({"prefetch": ["int4", "no_such_type"]}, codecs)

    def test_not_a_list_raises(self, codecs):
        with pytest.raises(ConfigError, match="list of type names"):
            prefetch_from_config({"prefetch": "int4"}, codecs)

    def test_not_a_mapping_raises(self):
        with pytest.raises(ConfigError, match="mapping"):
            prefetch_from_config(["int4"])  # type: ignore[arg-type]


class TestCacheFromConfig:
    def test_returns_cache(self, tmp_path, codecs):
        f = tmp_path / "pgoid.json"
        f.write_text(json.dumps({"prefetch": ["int4", "text"]}))
        cache = cache_from_config(f, registry=codecs)
        assert isinstance(cache, TypeCache)
        assert cache.prefetch == ["int4", "text"]
        assert cache.registry is codecs

    def test_default_prefetch(self, tmp_path, codecs):
        f = tmp_path / "pgoid.json"
        f.write_text("{}")
        cache = cache_from_config(f, registry=codecs)
        assert cache.prefetch == codecs.names


class TestLoadConfigContent:
    def test_top_level_list_raises(self, tmp_path):
        f = tmp_path / "pgoid.json"
        f.write_text('["int4", "text"]')
        with pytest.raises(ConfigError, match="expected a mapping"):
            load_config(f)

    def test_invalid_json_raises(self, tmp_path):
        f = tmp_path / "pgoid.json"
        f.write_text('{"prefetch": [')
        with pytest.raises(ConfigError, match="invalid JSON"):
            load_config(f)

    def test_invalid_toml_raises(self, tmp_path):
        f = tmp_path / "pgoid.toml"
        f.write_text('prefetch = [\n')
        try:
            with pytest.raises(ConfigError, match="invalid TOML"):
                load_config(f)
        except ImportError:
            pytest.skip("No TOML library available")

    def test_empty_yaml_is_empty_mapping(self, tmp_path):
        f = tmp_path / "pgoid.yaml"
        f.write_text("")
        try:
            assert load_config(f) == {}
        except ImportError:
            pytest.skip("pyyaml not installed")

    def test_uppercase_extension(self, tmp_path):
        f = tmp_path / "PGOID.JSON"
        f.write_text('{"prefetch": ["int4"]}')
        assert load_config(f) == {"prefetch": ["int4"]}
