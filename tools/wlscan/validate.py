"""
Opt-in consistency checks for a parsed Protocol.

The scanner itself accepts unresolved interface references and repeated
names; ``--strict`` runs these checks before anything is generated.
"""

from typing import Iterable, List

from .model import Message, Protocol
from .types import ArgType, c_name


def _duplicates(names: Iterable[str]) -> List[str]:
    seen = set()
    dupes = []
    for name in names:
        if name in seen and name not in dupes:
            dupes.append(name)
        seen.add(name)
    return dupes


def _check_messages(problems: List[str], iface_name: str, kind: str,
                    messages: List[Message]):
    for name in _duplicates(m.name for m in messages):
        problems.append(f"interface {iface_name!r}: duplicate {kind} {name!r}")
    for m in messages:
        for name in _duplicates(a.name for a in m.args):
            problems.append(
                f"{iface_name}.{m.name}: duplicate argument {name!r}")


def validate_protocol(protocol: Protocol, external: Iterable[str] = (),
                      prefix: str = "wl") -> List[str]:
    """
    Return a list of problems found in ``protocol`` (empty when clean).

    ``external`` names interfaces defined outside this protocol that object
    arguments may legitimately refer to.  ``prefix`` is the C name prefix;
    distinct interfaces that map to the same C name are reported.
    """
    problems: List[str] = []
    declared = {i.name for i in protocol.interfaces}
    known = declared | set(external)

    for name in _duplicates(i.name for i in protocol.interfaces):
        problems.append(f"duplicate interface {name!r}")

    c_names = {}
    for i in protocol.interfaces:
        c_names.setdefault(c_name(i.name, prefix), []).append(i.name)
    for generated, names in c_names.items():
        distinct = list(dict.fromkeys(names))
        if len(distinct) > 1:
            listed = ", ".join(repr(n) for n in distinct)
            problems.append(f"interfaces {listed} all generate {generated!r}")

    for i in protocol.interfaces:
        _check_messages(problems, i.name, "request", i.requests)
        _check_messages(problems, i.name, "event", i.events)

        for m in i.requests + i.events:
            for a in m.args:
                if a.type == ArgType.OBJECT and a.object_name not in known:
                    problems.append(
                        f"{i.name}.{m.name}: argument {a.name!r} refers to "
                        f"unknown interface {a.object_name!r}")

    return problems
