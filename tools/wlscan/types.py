"""
Type system: argument kinds, wire signature characters, C parameter types
and the identifier rules shared by every emitter.
"""

import string
from enum import Enum


class ArgType(Enum):
    NEW_ID = "new_id"
    INT = "int"
    UNSIGNED = "uint"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"

    @classmethod
    def from_xml(cls, type_name: str) -> "ArgType":
        """Decode an <arg type="..."> value. Unknown names are interface references."""
        return _XML_TYPES.get(type_name, cls.OBJECT)


# Exact match only. "object" is not listed; like any other unknown name it
# decodes as an interface reference.
_XML_TYPES = {
    "new_id": ArgType.NEW_ID,
    "int":    ArgType.INT,
    "uint":   ArgType.UNSIGNED,
    "string": ArgType.STRING,
    "array":  ArgType.ARRAY,
}

# ArgType -> one-character wire signature code.
SIGNATURE_MAP = {
    ArgType.INT:      "i",
    ArgType.NEW_ID:   "n",
    ArgType.UNSIGNED: "u",
    ArgType.STRING:   "s",
    ArgType.OBJECT:   "o",
    ArgType.ARRAY:    "a",
}

# ArgType -> C parameter type. OBJECT and ARRAY depend on the prefix and
# are built in c_type().
C_TYPE_MAP = {
    ArgType.INT:      "int32_t ",
    ArgType.NEW_ID:   "uint32_t ",
    ArgType.UNSIGNED: "uint32_t ",
    ArgType.STRING:   "const char *",
}

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def ascii_upper(name: str) -> str:
    """Uppercase ASCII letters only, independent of locale."""
    return name.translate(_ASCII_UPPER)


def c_name(name: str, prefix: str) -> str:
    """C identifier for an interface: ``<prefix>_<name>`` unless already prefixed."""
    if not prefix or name.startswith(prefix + "_"):
        return name
    return f"{prefix}_{name}"


def signature_char(arg) -> str:
    return SIGNATURE_MAP[arg.type]


def message_signature(message) -> str:
    """Wire signature of a message: one character per argument, in order."""
    return "".join(signature_char(a) for a in message.args)


def c_type(arg, prefix: str) -> str:
    """C parameter type for an argument, including the trailing space or '*'."""
    if arg.type == ArgType.OBJECT:
        return f"struct {c_name(arg.object_name, prefix)} *"
    if arg.type == ArgType.ARRAY:
        return f"struct {prefix}_array *"
    return C_TYPE_MAP[arg.type]
