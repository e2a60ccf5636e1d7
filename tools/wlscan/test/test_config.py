"""Tests for the YAML scanner configuration."""

import pytest

from tools.wlscan.config import (
    DEFAULT_COPYRIGHT,
    ConfigError,
    ScannerConfig,
    load_config,
    parse_config_yaml,
)


XDG_YAML = """\
prefix: xdg
include_guard: XDG_SHELL_PROTOCOL_H
includes:
  - wayland-util.h
  - xdg-util.h
export_macro: XDG_EXPORT
copyright: |
  /* Copyright 2024 Example */
external_interfaces:
  - wl_surface
  - wl_seat
"""


class TestDefaults:
    def test_defaults(self):
        config = ScannerConfig()
        assert config.prefix == "wl"
        assert config.include_guard == "WAYLAND_PROTOCOL_H"
        assert config.includes == ["wayland-util.h"]
        assert config.export_macro == "WL_EXPORT"
        assert config.copyright == DEFAULT_COPYRIGHT
        assert config.external_interfaces == []

    def test_empty_yaml_gives_defaults(self):
        assert parse_config_yaml("") == ScannerConfig()
        assert parse_config_yaml("  \n") == ScannerConfig()

    def test_null_document_gives_defaults(self):
        assert parse_config_yaml("~\n") == ScannerConfig()


class TestParse:
    def test_all_fields(self):
        config = parse_config_yaml(XDG_YAML)
        assert config.prefix == "xdg"
        assert config.include_guard == "XDG_SHELL_PROTOCOL_H"
        assert config.includes == ["wayland-util.h", "xdg-util.h"]
        assert config.export_macro == "XDG_EXPORT"
        assert config.copyright == "/* Copyright 2024 Example */"
        assert config.external_interfaces == ["wl_surface", "wl_seat"]

    def test_partial_keeps_defaults(self):
        config = parse_config_yaml("prefix: zwp\n")
        assert config.prefix == "zwp"
        assert config.include_guard == "WAYLAND_PROTOCOL_H"
        assert config.includes == ["wayland-util.h"]

    def test_empty_prefix_allowed(self):
        assert parse_config_yaml('prefix: ""\n').prefix == ""

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "scanner.yaml"
        path.write_text(XDG_YAML)
        assert load_config(str(path)).prefix == "xdg"


class TestValidation:
    def test_invalid_yaml(self):
        with pytest.raises(ConfigError, match="Invalid YAML"):
            parse_config_yaml("prefix: [unclosed\n")

    def test_root_must_be_mapping(self):
        with pytest.raises(ConfigError, match="mapping"):
            parse_config_yaml("- prefix\n")

    def test_wrong_type(self):
        with pytest.raises(ConfigError, match="prefix"):
            parse_config_yaml("prefix: 12\n")

    def test_includes_must_be_list(self):
        with pytest.raises(ConfigError, match="includes"):
            parse_config_yaml("includes: wayland-util.h\n")

    def test_unknown_field(self):
        with pytest.raises(ConfigError, match="suffix"):
            parse_config_yaml("suffix: x\n")

    def test_prefix_must_be_identifier(self):
        with pytest.raises(ConfigError, match="prefix"):
            parse_config_yaml("prefix: wl-x\n")

    def test_prefix_leading_digit(self):
        with pytest.raises(ConfigError, match="prefix"):
            parse_config_yaml("prefix: 1wl\n")

    def test_prefix_non_ascii(self):
        with pytest.raises(ConfigError, match="prefix"):
            parse_config_yaml("prefix: wlé\n")

    def test_empty_guard(self):
        with pytest.raises(ConfigError, match="include_guard"):
            parse_config_yaml('include_guard: ""\n')
