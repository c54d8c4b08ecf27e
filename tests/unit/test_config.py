"""Tests for config.load_config()."""

from __future__ import annotations

from pathlib import Path

from dagscope.config import load_config
from dagscope.model import NodeOrder


class TestDefaults:
    def test_default_config_no_file(self) -> None:
        config = load_config(None)
        assert config.ordering.seed_order == NodeOrder.FIRST_SEEN
        assert config.ordering.dag_node_order == NodeOrder.FIRST_SEEN
        assert config.paths.default_weight == 1.0
        assert config.gating.fail_on_cycle is True
        assert config.gating.fail_on_missing_path is False

    def test_default_config_missing_file(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "nonexistent.yml")
        assert config.paths.default_weight == 1.0

    def test_empty_file(self, tmp_path: Path) -> None:
        cfg = tmp_path / "empty.yml"
        cfg.write_text("")
        assert load_config(cfg).gating.fail_on_cycle is True


class TestCustomConfig:
    def test_custom_config(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.yml"
        cfg.write_text(
            "ordering:\n"
            "  seed_order: sorted\n"
            "  dag_node_order: sorted\n"
            "paths:\n"
            "  default_weight: 2.5\n"
            "gating:\n"
            "  fail_on_cycle: false\n"
            "  fail_on_missing_path: true\n"
        )
        config = load_config(cfg)
        assert config.ordering.seed_order == NodeOrder.SORTED
        assert config.ordering.dag_node_order == NodeOrder.SORTED
        assert config.paths.default_weight == 2.5
        assert config.gating.fail_on_cycle is False
        assert config.gating.fail_on_missing_path is True

    def test_partial_config_keeps_other_defaults(self, tmp_path: Path) -> None:
        cfg = tmp_path / "partial.yml"
        cfg.write_text("paths:\n  default_weight: 0.5\n")
        config = load_config(cfg)
        assert config.paths.default_weight == 0.5
        assert config.ordering.seed_order == NodeOrder.FIRST_SEEN


class TestMalformedYAML:
    def test_malformed_yaml_returns_defaults(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.yml"
        bad.write_text("{{{{not yaml!!!!")
        config = load_config(bad)
        assert config.gating.fail_on_cycle is True

    def test_non_mapping_returns_defaults(self, tmp_path: Path) -> None:
        bad = tmp_path / "list.yml"
        bad.write_text("- item1\n- item2\n")
        config = load_config(bad)
        assert config.paths.default_weight == 1.0

    def test_invalid_value_returns_defaults(self, tmp_path: Path) -> None:
        bad = tmp_path / "invalid.yml"
        bad.write_text("ordering:\n  seed_order: random\n")
        config = load_config(bad)
        assert config.ordering.seed_order == NodeOrder.FIRST_SEEN
