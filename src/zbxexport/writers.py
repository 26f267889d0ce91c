"""Export file writers and readers.

Host records are rendered as an indented XML document with a declaration
header; metric and trigger collections as indented JSON arrays.
"""

import json
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Sequence, TypeVar

from pydantic import BaseModel

from .api.exceptions import PersistenceError
from .models.host import Group, Host, Interface, Template

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'

# Characters XML 1.0 cannot carry, even as character references.
INVALID_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")

M = TypeVar("M", bound=BaseModel)


def ensure_dir(path: Path) -> Path:
    """Create a directory and its parents; existing directories are fine."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PersistenceError(f"Failed to create directory {path}: {e}")
    return path


def _sub(parent: ET.Element, tag: str, text: str) -> ET.Element:
    elem = ET.SubElement(parent, tag)
    elem.text = INVALID_XML_CHARS.sub("\ufffd", text)
    return elem


def _host_element(host: Host) -> ET.Element:
    root = ET.Element("host")
    _sub(root, "hostid", host.hostid)
    _sub(root, "name", host.name)
    _sub(root, "ip", host.ip)
    _sub(root, "status", host.status)
    _sub(root, "availability", host.availability)
    if host.notes:
        _sub(root, "notes", host.notes)

    if host.groups:
        groups = ET.SubElement(root, "groups")
        for group in host.groups:
            elem = ET.SubElement(groups, "group")
            _sub(elem, "groupid", group.groupid)
            _sub(elem, "name", group.name)

    if host.templates:
        templates = ET.SubElement(root, "templates")
        for template in host.templates:
            elem = ET.SubElement(templates, "template")
            _sub(elem, "templateid", template.templateid)
            _sub(elem, "name", template.name)

    if host.interfaces:
        interfaces = ET.SubElement(root, "interfaces")
        for iface in host.interfaces:
            elem = ET.SubElement(interfaces, "interface")
            _sub(elem, "interfaceid", iface.interfaceid)
            _sub(elem, "ip", iface.ip)
            _sub(elem, "port", iface.port)
            _sub(elem, "type", iface.type)

    return root


def render_host_xml(host: Host) -> str:
    """Render a host as an XML document string.

    Carriage returns are written as character references so parsers do not
    fold them into line feeds. Characters XML cannot represent become U+FFFD.
    """
    root = _host_element(host)
    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode").replace("\r", "&#13;")
    return XML_HEADER + body


def save_host_xml(path: Path, host: Host) -> None:
    """Write a host document.

    Args:
        path: Target file
        host: Host to render

    Raises:
        PersistenceError: If rendering or writing fails
    """
    try:
        document = render_host_xml(host)
        path.write_text(document, encoding="utf-8", newline="")
    except (OSError, ValueError) as e:
        raise PersistenceError(f"Failed to save XML file {path}: {e}")


def save_records(path: Path, records: Sequence[BaseModel]) -> None:
    """Write models as an indented JSON array.

    Args:
        path: Target file
        records: Models to serialize

    Raises:
        PersistenceError: If encoding or writing fails
    """
    try:
        data = json.dumps([r.model_dump() for r in records], indent=2, ensure_ascii=False)
        path.write_text(data, encoding="utf-8")
    except (OSError, TypeError, ValueError) as e:
        raise PersistenceError(f"Failed to save JSON file {path}: {e}")


def _text(elem: ET.Element, tag: str) -> str:
    child = elem.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text


def load_host_xml(path: Path) -> Host:
    """Parse a host document written by ``save_host_xml``.

    Raises:
        PersistenceError: If the file cannot be read or parsed
    """
    try:
        root = ET.parse(path).getroot()
    except (OSError, ET.ParseError) as e:
        raise PersistenceError(f"Failed to read XML file {path}: {e}")

    return Host(
        hostid=_text(root, "hostid"),
        name=_text(root, "name"),
        ip=_text(root, "ip"),
        status=_text(root, "status"),
        availability=_text(root, "availability"),
        notes=_text(root, "notes"),
        groups=[
            Group(groupid=_text(g, "groupid"), name=_text(g, "name"))
            for g in root.iterfind("groups/group")
        ],
        templates=[
            Template(templateid=_text(t, "templateid"), name=_text(t, "name"))
            for t in root.iterfind("templates/template")
        ],
        interfaces=[
            Interface(
                interfaceid=_text(i, "interfaceid"),
                ip=_text(i, "ip"),
                port=_text(i, "port"),
                type=_text(i, "type"),
            )
            for i in root.iterfind("interfaces/interface")
        ],
    )


def load_records(path: Path, model: type[M]) -> list[M]:
    """Parse a JSON array written by ``save_records``.

    Raises:
        PersistenceError: If the file cannot be read or does not match the model
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return [model.model_validate(item) for item in data]
    except (OSError, ValueError, TypeError) as e:
        raise PersistenceError(f"Failed to read JSON file {path}: {e}")
