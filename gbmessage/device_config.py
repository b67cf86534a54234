"""Device configuration command and its response."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from .message_base import MessageBase, MessageError
from .types import DeviceConfigType, MessageCmdType, MessageRootType, ResultType
from .xmlfields import add_element, read_enum


def config_sections():
    """Every single configuration section type, in bit order."""
    return [member for member in DeviceConfigType if member.value]


def section_type_for_tag(tag):
    """The configuration type whose element is named ``tag``, or None."""
    for member in config_sections():
        if member.name == tag:
            return member
    return None


@dataclass
class ConfigSection:
    """Contents of one configuration element as an ordered list of child fields.

    Each field is a ``(tag, value)`` pair where ``value`` is text (or a number
    to be written as text) or a nested ``ConfigSection``.
    """

    fields: list = field(default_factory=list)

    @classmethod
    def from_element(cls, element):
        """Read every child of ``element`` into a section."""
        section = cls()
        for child in element:
            if len(child):
                section.fields.append((child.tag, cls.from_element(child)))
            else:
                section.fields.append((child.tag, child.text or ""))
        return section

    def to_element(self, parent, tag):
        """Append this section to ``parent`` as ``<tag>`` and return the new element."""
        element = ET.SubElement(parent, tag)
        for child_tag, value in self.fields:
            if isinstance(value, ConfigSection):
                value.to_element(element, child_tag)
            else:
                add_element(element, child_tag, value)
        return element

    def get(self, tag, default=None):
        """Value of the first field named ``tag``."""
        for child_tag, value in self.fields:
            if child_tag == tag:
                return value
        return default

    def get_all(self, tag):
        """Values of every field named ``tag``, in order."""
        return [value for child_tag, value in self.fields if child_tag == tag]

    def set(self, tag, value):
        """Replace the first field named ``tag``, or append it."""
        for index, (child_tag, _) in enumerate(self.fields):
            if child_tag == tag:
                self.fields[index] = (tag, value)
                return
        self.fields.append((tag, value))


class DeviceConfigRequestMessage(MessageBase):
    """Sets one configuration section of a device."""

    def __init__(self, device_id="", config_type=DeviceConfigType.invalid, section=None):
        super().__init__(MessageRootType.Control, MessageCmdType.DeviceConfig, device_id=device_id)
        self.config_type = config_type
        self.section = section

    def load_detail(self):
        for child in self.xml:
            config_type = section_type_for_tag(child.tag)
            if config_type is not None:
                self.config_type = config_type
                self.section = ConfigSection.from_element(child)
                return
        if self.config_type is DeviceConfigType.invalid:
            raise MessageError("Invalid device config")

    def parse_detail(self):
        if self.config_type not in config_sections():
            raise MessageError("invalid config")
        section = self.section if self.section is not None else ConfigSection()
        section.to_element(self.xml, self.config_type.name)


class DeviceConfigResponseMessage(MessageBase):
    """Result of a device configuration command."""

    def __init__(self, device_id="", result=ResultType.OK, reason=""):
        super().__init__(
            MessageRootType.Response, MessageCmdType.DeviceConfig, device_id=device_id, reason=reason
        )
        self.result = result

    def load_detail(self):
        result = read_enum(self.xml, "Result", ResultType)
        if result is None:
            raise MessageError("invalid result")
        self.result = result

    def parse_detail(self):
        if self.result is ResultType.invalid:
            raise MessageError("invalid result")
        add_element(self.xml, "Result", self.result)