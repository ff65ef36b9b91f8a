import textwrap
from pathlib import Path

import pytest

from tplroot.config import CFG_FILE, load_config
from tplroot.config.model import RootOptions
from tplroot.errors import ConfigError

from tests.infrastructure import write


class TestRootOptions:

    def test_defaults(self):
        assert RootOptions.from_dict(None) == RootOptions(disallow_comments=False)
        assert RootOptions.from_dict({}) == RootOptions()

    def test_disallow_comments(self):
        assert RootOptions.from_dict({"disallowComments": True}).disallow_comments is True

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="Unknown rule option"):
            RootOptions.from_dict({"disallowComment": True})

    def test_non_boolean(self):
        with pytest.raises(ConfigError, match="must be a boolean"):
            RootOptions.from_dict({"disallowComments": "yes"})

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError, match="must be a mapping"):
            RootOptions.from_dict(["disallowComments"])

    @pytest.mark.parametrize("raw", [[], "", 0, False])
    def test_empty_non_mapping(self, raw):
        with pytest.raises(ConfigError, match="must be a mapping"):
            RootOptions.from_dict(raw)


class TestLoadConfig:

    def test_missing_file_gives_defaults(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.extensions == [".vue"]
        assert "node_modules/" in cfg.exclude
        assert cfg.options == RootOptions()

    def test_user_values_override_defaults(self, tmp_path: Path):
        write(tmp_path / CFG_FILE, textwrap.dedent("""
            schema_version: 1
            extensions: [".vue", "html"]
            exclude: ["legacy/"]
            options:
              disallowComments: true
            """))
        cfg = load_config(tmp_path)
        assert cfg.extensions == [".vue", ".html"]
        assert cfg.exclude == ["legacy/"]
        assert cfg.options.disallow_comments is True

    def test_explicit_path(self, tmp_path: Path):
        path = write(tmp_path / "conf" / "root.yaml", "options:\n  disallowComments: true\n")
        assert load_config(tmp_path, path).options.disallow_comments is True

    def test_explicit_path_must_exist(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="Config file not found"):
            load_config(tmp_path, tmp_path / "nope.yaml")

    def test_schema_mismatch(self, tmp_path: Path):
        write(tmp_path / CFG_FILE, "schema_version: 7\n")
        with pytest.raises(ConfigError, match="Unsupported config schema"):
            load_config(tmp_path)

    def test_not_a_mapping(self, tmp_path: Path):
        write(tmp_path / CFG_FILE, "- a\n- b\n")
        with pytest.raises(ConfigError, match="YAML must be a mapping"):
            load_config(tmp_path)

    def test_invalid_yaml(self, tmp_path: Path):
        write(tmp_path / CFG_FILE, "options: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(tmp_path)

    def test_bad_extensions(self, tmp_path: Path):
        write(tmp_path / CFG_FILE, "extensions: .vue\n")
        with pytest.raises(ConfigError, match="'extensions' must be a list of strings"):
            load_config(tmp_path)

    def test_bad_options(self, tmp_path: Path):
        write(tmp_path / CFG_FILE, "options:\n  disallowComments: 1\n")
        with pytest.raises(ConfigError, match="must be a boolean"):
            load_config(tmp_path)

    def test_empty_list_options(self, tmp_path: Path):
        write(tmp_path / CFG_FILE, "options: []\n")
        with pytest.raises(ConfigError, match="must be a mapping, got list"):
            load_config(tmp_path)

    def test_blank_options_give_defaults(self, tmp_path: Path):
        write(tmp_path / CFG_FILE, "options:\n")
        assert load_config(tmp_path).options == RootOptions()
