"""Unit tests for config loading, env interpolation, and validation."""
from __future__ import annotations

from pathlib import Path

import pytest

from sui_graph.config import (
    AppConfig,
    PaginationConfig,
    ProviderConfig,
    _interpolate_env,
    load_config,
)


class TestInterpolateEnv:
    def test_simple_substitution(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MY_VAR", "hello")
        assert _interpolate_env("${MY_VAR}") == "hello"

    def test_missing_var_becomes_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NONEXISTENT_VAR_XYZ", raising=False)
        assert _interpolate_env("${NONEXISTENT_VAR_XYZ}") == ""

    def test_nested(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("A", "x")
        result = _interpolate_env({"k": ["${A}", "y"], "n": 3})
        assert result == {"k": ["x", "y"], "n": 3}


class TestLoadConfig:
    def test_loads_valid_yaml(self, sample_yaml_path: Path) -> None:
        cfg = load_config(sample_yaml_path)
        assert isinstance(cfg, AppConfig)
        assert cfg.provider.rpc_endpoints == (
            "https://rpc1.example.com",
            "https://rpc2.example.com",
        )
        assert cfg.provider.rpc_timeout == 10
        assert cfg.pagination.default_page_size == 10
        assert cfg.pagination.max_page_size == 25

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nonexistent.yaml")

    def test_defaults_applied(self, tmp_path: Path) -> None:
        cfg_file = tmp_path / "config.yaml"
        cfg_file.write_text('provider:\n  rpc_endpoints: ["https://rpc.test.com"]\n')
        cfg = load_config(cfg_file)
        assert cfg.provider.rpc_timeout == 30
        assert cfg.pagination == PaginationConfig()

    def test_endpoints_from_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SUI_RPC_URLS", "https://a.test, https://b.test")
        cfg_file = tmp_path / "config.yaml"
        cfg_file.write_text('provider:\n  rpc_endpoints: "${SUI_RPC_URLS}"\n')
        cfg = load_config(cfg_file)
        assert cfg.provider.rpc_endpoints == ("https://a.test", "https://b.test")


class TestValidation:
    def _write(self, tmp_path: Path, text: str) -> Path:
        cfg_file = tmp_path / "config.yaml"
        cfg_file.write_text(text)
        return cfg_file

    def test_no_endpoints_raises(self, tmp_path: Path) -> None:
        path = self._write(tmp_path, "provider:\n  rpc_endpoints: []\n")
        with pytest.raises(ValueError, match="At least one RPC endpoint"):
            load_config(path)

    def test_empty_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="At least one RPC endpoint"):
            load_config(self._write(tmp_path, ""))

    def test_non_positive_timeout_raises(self, tmp_path: Path) -> None:
        path = self._write(
            tmp_path, "provider:\n  rpc_endpoints: [x]\n  rpc_timeout: 0\n"
        )
        with pytest.raises(ValueError, match="rpc_timeout"):
            load_config(path)

    def test_default_above_max_raises(self, tmp_path: Path) -> None:
        path = self._write(
            tmp_path,
            "provider:\n  rpc_endpoints: [x]\n"
            "pagination:\n  default_page_size: 60\n  max_page_size: 50\n",
        )
        with pytest.raises(ValueError, match="exceeds max_page_size"):
            load_config(path)

    def test_zero_page_size_raises(self, tmp_path: Path) -> None:
        path = self._write(
            tmp_path,
            "provider:\n  rpc_endpoints: [x]\npagination:\n  max_page_size: 0\n",
        )
        with pytest.raises(ValueError, match="positive"):
            load_config(path)


class TestFrozenConfigs:
    def test_provider_config_immutable(self) -> None:
        c = ProviderConfig(rpc_endpoints=("a",))
        with pytest.raises(AttributeError):
            c.rpc_timeout = 999  # type: ignore[misc]

    def test_pagination_config_immutable(self) -> None:
        p = PaginationConfig()
        with pytest.raises(AttributeError):
            p.max_page_size = 1  # type: ignore[misc]
