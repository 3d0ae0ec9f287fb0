"""Tests for TOML configuration loading."""

from pathlib import Path

import pytest

from dbsnp_rod.config import (
    ConfigValidationError,
    DbSNPConfig,
    load_config,
    validate_config,
)


def write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "dbsnp_rod.toml"
    path.write_text(body)
    return path


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_when_table_missing(self, tmp_path):
        config = load_config(write_config(tmp_path, "[other]\nkey = 1\n"))
        assert config == DbSNPConfig()

    def test_reads_values(self, tmp_path):
        path = write_config(
            tmp_path,
            """
[dbsnp_rod]
track_name = "dbsnp_130"
skip_malformed = false
log_level = "debug"
""",
        )
        config = load_config(path)
        assert config.track_name == "dbsnp_130"
        assert config.skip_malformed is False
        assert config.log_level == "DEBUG"
        assert config.reference_index is None

    def test_relative_reference_index(self, tmp_path):
        path = write_config(tmp_path, '[dbsnp_rod]\nreference_index = "ref.fa.fai"\n')
        config = load_config(path)
        assert config.reference_index == tmp_path / "ref.fa.fai"

    def test_overrides(self, tmp_path):
        path = write_config(tmp_path, "[dbsnp_rod]\nskip_malformed = true\n")
        config = load_config(path, overrides={"skip_malformed": False})
        assert config.skip_malformed is False

    def test_unknown_keys_ignored(self, tmp_path, caplog):
        path = write_config(tmp_path, '[dbsnp_rod]\nbatch_size = 10\ntrack_name = "x"\n')
        config = load_config(path)
        assert config.track_name == "x"
        assert "batch_size" in caplog.text

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path):
        path = write_config(tmp_path, "[dbsnp_rod\ntrack_name = \n")
        with pytest.raises(ConfigValidationError, match="Invalid TOML"):
            load_config(path)


class TestValidateConfig:
    """Tests for validate_config."""

    @pytest.mark.parametrize(
        "config_dict,message",
        [
            ({"track_name": 5}, "track_name must be a string"),
            ({"track_name": "  "}, "track_name cannot be empty"),
            ({"skip_malformed": "yes"}, "skip_malformed must be a boolean"),
            ({"reference_index": 3}, "reference_index must be a path"),
            ({"log_level": 10}, "log_level must be a string"),
            ({"log_level": "LOUD"}, "log_level must be one of"),
        ],
    )
    def test_invalid_values(self, config_dict, message):
        with pytest.raises(ConfigValidationError, match=message):
            validate_config(config_dict)

    def test_valid_values(self):
        validate_config(
            {
                "track_name": "dbsnp",
                "skip_malformed": True,
                "reference_index": "hg19.fa.fai",
                "log_level": "warning",
            }
        )


class TestBuildLocator:
    """Tests for the locator built from configuration."""

    def test_permissive_without_index(self):
        assert DbSNPConfig().build_locator().contigs is None

    def test_from_index(self, fai_file):
        locator = DbSNPConfig(reference_index=fai_file).build_locator()
        assert set(locator.contigs) == {"chr1", "chr2"}
