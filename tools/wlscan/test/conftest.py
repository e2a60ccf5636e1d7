"""Shared fixtures for wlscan tests."""

import pytest
import sys
import os

# Add the project root to sys.path so 'tools.wlscan' is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", ".."))

from tools.wlscan.parser import parse_protocol_string


DEMO_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<protocol name="demo">
  <interface name="wl_demo" version="3">
    <request name="destroy"/>
    <event name="done">
      <arg name="serial" type="uint"/>
    </event>
  </interface>
</protocol>
"""


# Old-style names without the prefix, every argument type, an interface
# with no events and one with no requests.
DISPLAY_XML = """\
<protocol name="wayland">
  <copyright>Ignored by the scanner.</copyright>

  <interface name="display" version="1">
    <description summary="core global object"/>
    <request name="sync">
      <arg name="key" type="uint"/>
    </request>
    <request name="frame">
      <arg name="id" type="new_id"/>
    </request>
    <event name="invalid_object">
      <arg name="object_id" type="object"/>
    </event>
    <event name="global">
      <arg name="id" type="new_id"/>
      <arg name="name" type="string"/>
      <arg name="version" type="uint"/>
    </event>
  </interface>

  <interface name="compositor" version="1">
    <request name="create_surface">
      <arg name="id" type="new_id"/>
    </request>
  </interface>

  <interface name="surface" version="2">
    <request name="destroy"/>
    <request name="attach">
      <arg name="buffer" type="buffer"/>
      <arg name="x" type="int"/>
      <arg name="y" type="int"/>
    </request>
    <request name="damage">
      <arg name="region" type="array"/>
    </request>
  </interface>

  <interface name="buffer" version="1">
    <event name="release"/>
  </interface>
</protocol>
"""


@pytest.fixture
def demo_xml():
    return DEMO_XML


@pytest.fixture
def display_xml():
    return DISPLAY_XML


@pytest.fixture
def demo_protocol():
    """Parsed single-interface wl_demo protocol."""
    return parse_protocol_string(DEMO_XML)


@pytest.fixture
def display_protocol():
    """Parsed multi-interface protocol exercising every argument type."""
    return parse_protocol_string(DISPLAY_XML)
