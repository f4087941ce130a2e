"""
Encode/decode adapters around Version.

Every adapter only reads ``Version.original_text`` on the way out and calls
``parse`` on the way in. Format-level errors (bad JSON, bad YAML, bad XML)
are left to propagate from the underlying library.
"""
import json
import logging
import xml.etree.ElementTree as ET

import yaml

from .exceptions import VersionDecodeError
from .version import Version, parse

logger = logging.getLogger(__name__)


# --- JSON ---
class VersionJSONEncoder(json.JSONEncoder):
    """``json.dumps(obj, cls=VersionJSONEncoder)`` writes Versions as strings."""

    def default(self, o):
        if isinstance(o, Version):
            return o.original_text
        return super().default(o)


def to_json(version: Version) -> str:
    return json.dumps(version.original_text)


def from_json(document: str | bytes) -> Version:
    value = json.loads(document)
    if not isinstance(value, str):
        raise VersionDecodeError(
            f"Expected a JSON string for a version, got {type(value).__name__}"
        )
    logger.debug(f"Decoded version '{value}' from JSON")
    return parse(value)


# --- YAML ---
class VersionDumper(yaml.SafeDumper):
    """SafeDumper that writes embedded Versions as plain strings."""
    pass


def _represent_version(dumper: yaml.SafeDumper, version: Version) -> yaml.Node:
    return dumper.represent_str(version.original_text)


VersionDumper.add_representer(Version, _represent_version)


def to_yaml(version: Version) -> str:
    return yaml.dump(version, Dumper=VersionDumper)


def from_yaml(document: str) -> Version:
    """
    Read a single YAML scalar as a version.

    The raw scalar text is used instead of the resolved value, so an unquoted
    ``1.10`` stays "1.10" rather than turning into the float 1.1.
    """
    node = yaml.compose(document, Loader=yaml.SafeLoader)
    if node is None:
        raise VersionDecodeError("Empty YAML document holds no version")
    if not isinstance(node, yaml.ScalarNode):
        raise VersionDecodeError(f"Expected a YAML scalar for a version, got {node.id}")
    logger.debug(f"Decoded version '{node.value}' from YAML")
    return parse(node.value)


# --- XML ---
def to_xml(version: Version, tag: str = "version") -> str:
    element = ET.Element(tag.lower())
    element.text = version.original_text
    return ET.tostring(element, encoding="unicode")


def from_xml(document: str | bytes) -> Version:
    element = ET.fromstring(document)
    text = "".join(element.itertext())
    logger.debug(f"Decoded version '{text}' from <{element.tag}>")
    return parse(text)
