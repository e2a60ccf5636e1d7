"""
Emitter: generates the C client/server headers and the signature-table
code file from a Protocol.

Both emitters only read the model.  Identifiers are built with the
helpers in ``types`` so that the header and code outputs always agree.
"""

from typing import List, Optional

from .config import ScannerConfig
from .model import Interface, Message, Protocol
from .types import ascii_upper, c_name, c_type, message_signature


# ── Shared helpers ───────────────────────────────────────────────────

def _includes(config: ScannerConfig) -> List[str]:
    return [f'#include "{h}"' for h in config.includes]


def upper_c_name(interface: Interface, prefix: str) -> str:
    """``c_name()`` of the interface, uppercased from the cached ASCII form."""
    if c_name(interface.name, prefix) == interface.name:
        return interface.uppercase_name
    return f"{ascii_upper(prefix)}_{interface.uppercase_name}"


def opcode_name(interface: Interface, message: Message, prefix: str) -> str:
    """Name of the opcode constant for ``message`` in ``interface``."""
    return f"{upper_c_name(interface, prefix)}_{message.uppercase_name}"


def descriptor_name(interface: Interface, prefix: str) -> str:
    """Name of the interface descriptor object shared by header and code."""
    return f"{c_name(interface.name, prefix)}_interface"


def table_name(interface: Interface, suffix: str) -> str:
    return f"{interface.name}_{suffix}"


# ── Header ───────────────────────────────────────────────────────────

def _emit_opcodes(lines: List[str], messages: List[Message],
                  interface: Interface, prefix: str):
    if not messages:
        return

    for opcode, m in enumerate(messages):
        lines.append(f"#define {opcode_name(interface, m, prefix)} {opcode}")
    lines.append("")


def _emit_struct(lines: List[str], messages: List[Message],
                 interface: Interface, server: bool, prefix: str):
    if not messages:
        return

    iface_type = c_name(interface.name, prefix)
    if server:
        lines.append(f"struct {iface_type}_interface {{")
        context = (f"struct {prefix}_client *client, "
                   f"struct {iface_type} *{interface.name}")
    else:
        lines.append(f"struct {iface_type}_listener {{")
        context = f"void *data, struct {iface_type} *{interface.name}"

    for m in messages:
        params = [context] + [f"{c_type(a, prefix)}{a.name}" for a in m.args]
        lines.append(f"\tvoid (*{m.name})({', '.join(params)});")

    lines.append("};")
    lines.append("")


def emit_header(protocol: Protocol, server: bool,
                config: Optional[ScannerConfig] = None) -> str:
    """
    Generate the client (``server=False``) or server (``server=True``) header.

    The server header holds the dispatch tables for incoming requests and
    opcodes for outgoing events; the client header is the mirror image.
    """
    config = config or ScannerConfig()
    prefix = config.prefix
    guard = config.include_guard

    lines = [
        config.copyright,
        "",
        "",
        f"#ifndef {guard}",
        f"#define {guard}",
        "",
        "#ifdef  __cplusplus",
        'extern "C" {',
        "#endif",
        "",
        "#include <stdint.h>",
    ]
    lines.extend(_includes(config))
    lines.append("")
    lines.append(f"struct {prefix}_client;")
    lines.append("")

    # Structs below reference each other's handle types.
    for i in protocol.interfaces:
        lines.append(f"struct {c_name(i.name, prefix)};")
    lines.append("")

    for i in protocol.interfaces:
        if server:
            _emit_struct(lines, i.requests, i, True, prefix)
            _emit_opcodes(lines, i.events, i, prefix)
        else:
            _emit_struct(lines, i.events, i, False, prefix)
            _emit_opcodes(lines, i.requests, i, prefix)

        lines.append(f"extern const struct {prefix}_interface "
                     f"{descriptor_name(i, prefix)};")
        lines.append("")

    lines.extend([
        "#ifdef  __cplusplus",
        "}",
        "#endif",
        "",
        "#endif",
        "",
    ])
    return "\n".join(lines)


# ── Code ─────────────────────────────────────────────────────────────

def _emit_messages(lines: List[str], messages: List[Message],
                   interface: Interface, suffix: str, prefix: str):
    if not messages:
        return

    lines.append(f"static const struct {prefix}_message "
                 f"{table_name(interface, suffix)}[] = {{")
    for m in messages:
        lines.append(f'\t{{ "{m.name}", "{message_signature(m)}" }},')
    lines.append("};")
    lines.append("")


def _descriptor_field(messages: List[Message], interface: Interface,
                      suffix: str) -> str:
    if not messages:
        return "\t0, NULL,"
    return f"\t{len(messages)}, {table_name(interface, suffix)},"


def emit_code(protocol: Protocol, config: Optional[ScannerConfig] = None) -> str:
    """Generate the signature tables and interface descriptors."""
    config = config or ScannerConfig()
    prefix = config.prefix
    export = f"{config.export_macro} " if config.export_macro else ""

    lines = [
        config.copyright,
        "",
        "",
        "#include <stdlib.h>",
        "#include <stdint.h>",
    ]
    lines.extend(_includes(config))
    lines.append("")

    for i in protocol.interfaces:
        _emit_messages(lines, i.requests, i, "requests", prefix)
        _emit_messages(lines, i.events, i, "events", prefix)

        lines.append(f"{export}const struct {prefix}_interface "
                     f"{descriptor_name(i, prefix)} = {{")
        lines.append(f'\t"{i.name}", {i.version},')
        lines.append(_descriptor_field(i.requests, i, "requests"))
        lines.append(_descriptor_field(i.events, i, "events"))
        lines.append("};")
        lines.append("")

    return "\n".join(lines)
