"""
YAML output configuration for wlscan.

Controls the naming and boilerplate of generated files.  Every key is
optional; the defaults reproduce the classic Wayland scanner output.
"""

import re

import yaml
from dataclasses import dataclass, field
from typing import List

DEFAULT_COPYRIGHT = """\
/*
 * Copyright © 2010 Kristian Høgsberg
 *
 * Permission to use, copy, modify, distribute, and sell this software and its
 * documentation for any purpose is hereby granted without fee, provided that
 * the above copyright notice appear in all copies and that both that copyright
 * notice and this permission notice appear in supporting documentation, and
 * that the name of the copyright holders not be used in advertising or
 * publicity pertaining to distribution of the software without specific,
 * written prior permission.  The copyright holders make no representations
 * about the suitability of this software for any purpose.  It is provided "as
 * is" without express or implied warranty.
 *
 * THE COPYRIGHT HOLDERS DISCLAIM ALL WARRANTIES WITH REGARD TO THIS SOFTWARE,
 * INCLUDING ALL IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS, IN NO
 * EVENT SHALL THE COPYRIGHT HOLDERS BE LIABLE FOR ANY SPECIAL, INDIRECT OR
 * CONSEQUENTIAL DAMAGES OR ANY DAMAGES WHATSOEVER RESULTING FROM LOSS OF USE,
 * DATA OR PROFITS, WHETHER IN AN ACTION OF CONTRACT, NEGLIGENCE OR OTHER
 * TORTIOUS ACTION, ARISING OUT OF OR IN CONNECTION WITH THE USE OR PERFORMANCE
 * OF THIS SOFTWARE.
 */"""


class ConfigError(Exception):
    """Raised when a scanner configuration file fails validation."""
    pass


@dataclass
class ScannerConfig:
    """Naming and boilerplate used by the emitters."""
    prefix: str = "wl"
    include_guard: str = "WAYLAND_PROTOCOL_H"
    includes: List[str] = field(default_factory=lambda: ["wayland-util.h"])
    export_macro: str = "WL_EXPORT"
    copyright: str = DEFAULT_COPYRIGHT
    external_interfaces: List[str] = field(default_factory=list)


def _optional_str(data: dict, key: str, default: str) -> str:
    if key not in data or data[key] is None:
        return default
    value = data[key]
    if not isinstance(value, str):
        raise ConfigError(
            f"Field '{key}' must be a string, got {type(value).__name__}")
    return value


def _optional_str_list(data: dict, key: str, default: List[str]) -> List[str]:
    if key not in data or data[key] is None:
        return list(default)
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"Field '{key}' must be a list of strings")
    return list(value)


def parse_config_yaml(yaml_str: str) -> ScannerConfig:
    """Parse a YAML configuration string into a ScannerConfig.

    Args:
        yaml_str: YAML string; empty input yields the defaults.

    Returns:
        ScannerConfig with defaults filled in for absent keys.

    Raises:
        ConfigError: If the YAML is invalid or a field has the wrong type.
    """
    defaults = ScannerConfig()
    if not yaml_str or not yaml_str.strip():
        return defaults

    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}")

    if data is None:
        return defaults
    if not isinstance(data, dict):
        raise ConfigError("YAML root must be a mapping")

    unknown = sorted(set(data) - set(ScannerConfig.__dataclass_fields__))
    if unknown:
        raise ConfigError(f"Unknown field(s): {', '.join(map(str, unknown))}")

    prefix = _optional_str(data, "prefix", defaults.prefix)
    if prefix and not re.fullmatch(r"[A-Za-z_]\w*", prefix, re.ASCII):
        raise ConfigError(f"Field 'prefix' is not a C identifier: {prefix!r}")

    include_guard = _optional_str(data, "include_guard", defaults.include_guard)
    if not include_guard:
        raise ConfigError("Field 'include_guard' must not be empty")

    return ScannerConfig(
        prefix=prefix,
        include_guard=include_guard,
        includes=_optional_str_list(data, "includes", defaults.includes),
        export_macro=_optional_str(data, "export_macro", defaults.export_macro),
        copyright=_optional_str(data, "copyright", defaults.copyright).rstrip("\n"),
        external_interfaces=_optional_str_list(
            data, "external_interfaces", defaults.external_interfaces),
    )


def load_config(path: str) -> ScannerConfig:
    """Read and parse a YAML configuration file."""
    with open(path, encoding="utf-8") as f:
        return parse_config_yaml(f.read())
