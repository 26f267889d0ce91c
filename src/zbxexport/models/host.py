"""Host inventory models."""

from typing import Any

from pydantic import AliasChoices, BaseModel, Field

AVAILABLE = "Available"
UNAVAILABLE = "Unavailable"
UNKNOWN = "Unknown"


def availability_label(flag: Any) -> str:
    """Map a raw availability flag to its display label.

    Args:
        flag: Raw ``available`` value from the API

    Returns:
        ``Available`` for ``"1"``, ``Unavailable`` for ``"0"``, else ``Unknown``
    """
    if flag == "1":
        return AVAILABLE
    if flag == "0":
        return UNAVAILABLE
    return UNKNOWN


def interface_availability_label(flag: Any) -> str:
    """Map an interface availability flag to its display label.

    Interfaces use 0 for unknown, 1 for available and 2 for unavailable.
    """
    if flag == "1":
        return AVAILABLE
    if flag == "2":
        return UNAVAILABLE
    return UNKNOWN


def _path_component(value: str) -> str:
    return value.replace("/", "_").replace("\\", "_")


class Group(BaseModel):
    """Host group."""

    groupid: str
    name: str


class Template(BaseModel):
    """Template linked to a host."""

    templateid: str
    name: str


class Interface(BaseModel):
    """Host network interface."""

    interfaceid: str = ""
    ip: str
    port: str = ""
    type: str = ""


class InterfaceRecord(Interface):
    """Interface as returned by ``host.get``."""

    available: Any = None


class HostRecord(BaseModel):
    """Host as returned by ``host.get``."""

    hostid: str
    name: str
    status: str
    available: Any = None
    description: Any = None
    groups: list[Group] = Field(
        default_factory=list, validation_alias=AliasChoices("groups", "hostgroups")
    )
    parent_templates: list[Template] = Field(
        default_factory=list, validation_alias="parentTemplates"
    )
    interfaces: list[InterfaceRecord] = Field(..., min_length=1)


class Host(BaseModel):
    """Exported host document."""

    hostid: str
    name: str
    ip: str
    status: str
    availability: str = UNKNOWN
    notes: str = ""
    groups: list[Group] = Field(default_factory=list)
    templates: list[Template] = Field(default_factory=list)
    interfaces: list[Interface] = Field(default_factory=list)

    @classmethod
    def from_api(cls, record: Any, populate_interfaces: bool = True) -> "Host":
        """Project a ``host.get`` record into a Host.

        The primary IP is the first interface's address. Availability comes
        from the host flag, or from the first interface when the host record
        carries none.

        Args:
            record: Raw host record
            populate_interfaces: Whether to keep the full interface list

        Returns:
            Host

        Raises:
            pydantic.ValidationError: If a required field is missing or mistyped
        """
        raw = HostRecord.model_validate(record)
        primary = raw.interfaces[0]
        if raw.available is not None:
            availability = availability_label(raw.available)
        else:
            availability = interface_availability_label(primary.available)

        interfaces: list[Interface] = []
        if populate_interfaces:
            interfaces = [
                Interface(interfaceid=i.interfaceid, ip=i.ip, port=i.port, type=i.type)
                for i in raw.interfaces
            ]

        return cls(
            hostid=raw.hostid,
            name=raw.name,
            ip=primary.ip,
            status=raw.status,
            availability=availability,
            notes=raw.description if isinstance(raw.description, str) else "",
            groups=raw.groups,
            templates=raw.parent_templates,
            interfaces=interfaces,
        )

    @property
    def directory_name(self) -> str:
        """Host name made safe for use as a single path component.

        Names that would resolve to the hosts directory or its parent fall
        back to the host ID.
        """
        name = _path_component(self.name)
        if name in ("", ".", ".."):
            name = _path_component(f"hostid-{self.hostid}")
        return name
