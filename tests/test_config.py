"""Unit tests for configuration models (tfgen.config).

Tests cover:
- DatabaseConfig / FeatureFlags defaults
- ProjectConfig defaults derived from the name, validation, save/load
- IntegrationConfig bounds
- GeneratorConfig.from_env and override precedence
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from tfgen.config import (
    DEFAULT_ENDPOINT,
    DatabaseConfig,
    FeatureFlags,
    GeneratorConfig,
    IntegrationConfig,
    ProjectConfig,
)


# ---------------------------------------------------------------------------
# DatabaseConfig / FeatureFlags
# ---------------------------------------------------------------------------


class TestDatabaseConfig:
    @pytest.mark.unit
    def test_defaults(self):
        db = DatabaseConfig()
        assert db.driver == "postgres"
        assert db.host == "localhost"
        assert db.port == "5432"
        assert db.name == ""
        assert db.user == "postgres"


class TestFeatureFlags:
    @pytest.mark.unit
    def test_all_enabled_by_default(self):
        flags = FeatureFlags()
        assert flags.telemetry and flags.swagger and flags.cors
        assert flags.auth and flags.rate_limit

    @pytest.mark.unit
    def test_single_flag_disabled(self):
        flags = FeatureFlags(cors=False)
        assert flags.cors is False
        assert flags.auth is True


# ---------------------------------------------------------------------------
# ProjectConfig
# ---------------------------------------------------------------------------


class TestProjectConfig:
    @pytest.mark.unit
    def test_defaults_derived_from_name(self):
        project = ProjectConfig(name="My-Shop")
        assert project.module_path == "github.com/example/my-shop"
        assert project.service_name == "My-Shop"
        assert project.database.name == "my_shop"
        assert project.env_prefix == "MY_SHOP"
        assert project.service_version == "1.0.0"
        assert project.environment == "development"
        assert project.server_port == "8080"

    @pytest.mark.unit
    def test_explicit_values_win(self):
        project = ProjectConfig(
            name="shop",
            module_path="example.com/shop",
            service_name="shop-api",
            database=DatabaseConfig(name="orders"),
        )
        assert project.module_path == "example.com/shop"
        assert project.service_name == "shop-api"
        assert project.database.name == "orders"

    @pytest.mark.unit
    def test_database_dict_gets_default_name(self):
        project = ProjectConfig(name="shop", database={"driver": "mysql"})
        assert project.database.driver == "mysql"
        assert project.database.name == "shop"

    @pytest.mark.unit
    def test_name_is_stripped(self):
        assert ProjectConfig(name="  shop  ").name == "shop"

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError):
            ProjectConfig(name=name)

    @pytest.mark.unit
    def test_nul_in_name_rejected(self):
        with pytest.raises(ValidationError):
            ProjectConfig(name="sh\x00op")

    @pytest.mark.unit
    def test_name_required(self):
        with pytest.raises(ValidationError):
            ProjectConfig()

    @pytest.mark.unit
    def test_frozen(self):
        project = ProjectConfig(name="shop")
        with pytest.raises(ValidationError):
            project.name = "other"

    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        project = ProjectConfig(name="shop", features=FeatureFlags(auth=False))
        path = project.save(tmp_path / "nested" / "project.json")
        assert path.exists()
        data = json.loads(path.read_text())
        assert data["features"]["auth"] is False
        assert ProjectConfig.load(path) == project


# ---------------------------------------------------------------------------
# IntegrationConfig
# ---------------------------------------------------------------------------


class TestIntegrationConfig:
    @pytest.mark.unit
    def test_defaults(self):
        cfg = IntegrationConfig()
        assert cfg.endpoint == DEFAULT_ENDPOINT
        assert cfg.metrics and cfg.logs and cfg.traces
        assert cfg.num_workers == 5
        assert cfg.queue_size == 100

    @pytest.mark.unit
    def test_workers_must_be_positive(self):
        with pytest.raises(ValidationError):
            IntegrationConfig(num_workers=0)


# ---------------------------------------------------------------------------
# GeneratorConfig
# ---------------------------------------------------------------------------


class TestGeneratorConfig:
    @pytest.mark.unit
    def test_defaults(self, monkeypatch):
        for var in ("TFGEN_OUTPUT_DIR", "TFGEN_TEMPLATE_DIR", "TFGEN_NO_BANNER"):
            monkeypatch.delenv(var, raising=False)
        cfg = GeneratorConfig.from_env()
        assert cfg.output_dir == Path(".")
        assert cfg.template_dir is None
        assert cfg.no_banner is False

    @pytest.mark.unit
    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TFGEN_OUTPUT_DIR", str(tmp_path / "out"))
        monkeypatch.setenv("TFGEN_TEMPLATE_DIR", str(tmp_path / "tpl"))
        monkeypatch.setenv("TFGEN_NO_BANNER", "yes")
        cfg = GeneratorConfig.from_env()
        assert cfg.output_dir == tmp_path / "out"
        assert cfg.template_dir == tmp_path / "tpl"
        assert cfg.no_banner is True

    @pytest.mark.unit
    @pytest.mark.parametrize("value, expected", [("1", True), ("TRUE", True), ("0", False), ("no", False)])
    def test_no_banner_values(self, monkeypatch, value, expected):
        monkeypatch.setenv("TFGEN_NO_BANNER", value)
        assert GeneratorConfig.from_env().no_banner is expected

    @pytest.mark.unit
    def test_overrides_win(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TFGEN_OUTPUT_DIR", str(tmp_path / "env"))
        cfg = GeneratorConfig.from_env(output_dir=tmp_path / "flag", template_dir=None)
        assert cfg.output_dir == tmp_path / "flag"

    @pytest.mark.unit
    def test_none_override_keeps_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TFGEN_OUTPUT_DIR", str(tmp_path / "env"))
        assert GeneratorConfig.from_env(output_dir=None).output_dir == tmp_path / "env"
