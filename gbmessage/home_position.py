"""Home position query and response."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from .message_base import MessageBase
from .types import MessageCmdType, MessageRootType
from .xmlfields import add_element, read_int


@dataclass
class HomePositionType:
    """Home (watch) position settings of a PTZ camera."""

    enabled: int = 0
    preset_index: int = 0
    reset_time: int = 0


class HomePositionRequestMessage(MessageBase):
    """Asks a device for its home position settings."""

    def __init__(self, device_id=""):
        super().__init__(MessageRootType.Query, MessageCmdType.HomePositionQuery, device_id=device_id)


class HomePositionResponseMessage(MessageBase):
    """Home position settings, or none when the device reports none."""

    def __init__(self, device_id="", home_position=None):
        super().__init__(MessageRootType.Response, MessageCmdType.HomePositionQuery, device_id=device_id)
        self.home_position = home_position

    def load_detail(self):
        element = self.xml.find("HomePosition")
        if element is None or len(element) == 0:
            return
        position = HomePositionType()
        for attr, tag in (("enabled", "Enabled"), ("preset_index", "PresetIndex"), ("reset_time", "ResetTime")):
            value = read_int(element, tag)
            if value is not None:
                setattr(position, attr, value)
        self.home_position = position

    def parse_detail(self):
        if self.home_position is None:
            return
        element = ET.SubElement(self.xml, "HomePosition")
        add_element(element, "Enabled", self.home_position.enabled)
        add_element(element, "PresetIndex", self.home_position.preset_index)
        add_element(element, "ResetTime", self.home_position.reset_time)