"""
Parser: turns protocol XML into a Protocol model.

The XML itself is tokenized by ElementTree's incremental pull parser; only
"element opened" events are consumed.  ProtocolBuilder tracks which
interface and message new children belong to.
"""

import io
import re
import xml.etree.ElementTree as ET
from typing import Dict, Optional, Union

from .model import Arg, Interface, Message, Protocol
from .types import ArgType

XML_BUFFER_SIZE = 4096

_VERSION_RE = re.compile(r"\s*[0-9]+\s*")


class SchemaError(Exception):
    """Raised when a protocol description is malformed or incomplete."""
    pass


class ProtocolBuilder:
    """
    Builds a Protocol from a sequence of opened XML elements.

    Feed every element in document order to ``handle_element_open()``; the
    finished tree is in ``protocol``.  One builder per compilation.
    """

    def __init__(self):
        self.protocol = Protocol()
        self.interface: Optional[Interface] = None
        self.message: Optional[Message] = None

    def handle_element_open(self, tag: str, attributes: Dict[str, str]):
        if tag == "interface":
            self._open_interface(attributes)
        elif tag in ("request", "event"):
            self._open_message(tag, attributes)
        elif tag == "arg":
            self._open_arg(attributes)
        # Anything else (protocol, description, copyright, ...) carries
        # nothing the generated code needs.

    # ── Elements ─────────────────────────────────────────────────────

    def _open_interface(self, attributes: Dict[str, str]):
        name = attributes.get("name")
        if not name:
            raise SchemaError("no interface name given")

        raw_version = attributes.get("version")
        if raw_version is None or not raw_version.strip():
            raise SchemaError("no interface version given")
        if not _VERSION_RE.fullmatch(raw_version):
            raise SchemaError(
                f"invalid interface version {raw_version!r} for interface {name!r}")
        version = int(raw_version)
        if version == 0:
            raise SchemaError("no interface version given")

        interface = Interface(name=name, version=version)
        self.protocol.interfaces.append(interface)
        self.interface = interface
        self.message = None

    def _open_message(self, tag: str, attributes: Dict[str, str]):
        name = attributes.get("name")
        if not name:
            raise SchemaError(f"no {tag} name given")
        if self.interface is None:
            raise SchemaError(f"{tag} {name!r} outside of an interface")

        message = Message(name=name)
        if tag == "request":
            self.interface.requests.append(message)
        else:
            self.interface.events.append(message)
        self.message = message

    def _open_arg(self, attributes: Dict[str, str]):
        name = attributes.get("name")
        if not name:
            raise SchemaError("no argument name given")
        type_name = attributes.get("type")
        if not type_name:
            raise SchemaError(f"no argument type given for argument {name!r}")
        if self.message is None:
            raise SchemaError(f"argument {name!r} outside of a request or event")

        arg_type = ArgType.from_xml(type_name)
        object_name = type_name if arg_type == ArgType.OBJECT else None
        self.message.args.append(Arg(name=name, type=arg_type, object_name=object_name))


def _drain(pull: ET.XMLPullParser, builder: ProtocolBuilder):
    for _event, elem in pull.read_events():
        # "{uri}interface" -> "interface"
        tag = elem.tag.rpartition("}")[2]
        builder.handle_element_open(tag, dict(elem.attrib))


def parse_protocol(stream) -> Protocol:
    """
    Read a binary stream to completion and build its Protocol.

    Raises SchemaError on malformed XML or a missing required attribute.
    OSError from the stream propagates unchanged.
    """
    builder = ProtocolBuilder()
    pull = ET.XMLPullParser(events=("start",))
    try:
        while True:
            chunk = stream.read(XML_BUFFER_SIZE)
            if not chunk:
                break
            pull.feed(chunk)
            _drain(pull, builder)
        pull.close()
        _drain(pull, builder)
    except ET.ParseError as e:
        raise SchemaError(f"malformed protocol XML: {e}")
    return builder.protocol


def parse_protocol_string(text: Union[str, bytes]) -> Protocol:
    """Build a Protocol from an in-memory XML document."""
    if isinstance(text, str):
        text = text.encode("utf-8")
    return parse_protocol(io.BytesIO(text))
