"""
Protocol model: the tree built by the parser and read by the emitters.

Protocol -> Interface -> Message (requests / events) -> Arg.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .types import ArgType, ascii_upper


@dataclass
class Arg:
    name: str
    type: ArgType
    object_name: Optional[str] = None  # referenced interface, OBJECT only


@dataclass
class Message:
    name: str
    args: List[Arg] = field(default_factory=list)
    uppercase_name: str = field(init=False)

    def __post_init__(self):
        self.uppercase_name = ascii_upper(self.name)


@dataclass
class Interface:
    name: str
    version: int
    requests: List[Message] = field(default_factory=list)
    events: List[Message] = field(default_factory=list)
    uppercase_name: str = field(init=False)

    def __post_init__(self):
        self.uppercase_name = ascii_upper(self.name)


@dataclass
class Protocol:
    interfaces: List[Interface] = field(default_factory=list)
