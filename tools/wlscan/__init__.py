"""
wlscan: protocol XML scanner.

Reads an XML protocol description (interfaces with requests, events and
typed arguments) and generates the matching C client/server headers and
the wire signature tables that go with them.
"""
