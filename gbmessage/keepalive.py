"""Keepalive notification."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from .message_base import MessageBase, MessageError
from .types import MessageCmdType, MessageRootType, ResultType
from .xmlfields import add_element, read_all_texts, read_enum


class KeepaliveMessageRequest(MessageBase):
    """Periodic status notification, optionally listing faulty device ids."""

    def __init__(self, device_id="", status=ResultType.OK, info=None):
        super().__init__(MessageRootType.Notify, MessageCmdType.Keepalive, device_id=device_id)
        self.status = status
        self.info = list(info) if info else []

    def load_detail(self):
        status = read_enum(self.xml, "Status", ResultType)
        if status is None:
            raise MessageError("invalid Status")
        self.status = status
        self.info.extend(read_all_texts(self.xml.find("Info"), "DeviceID"))

    def parse_detail(self):
        add_element(self.xml, "Status", self.status)
        if self.info:
            info = ET.SubElement(self.xml, "Info")
            for device_id in self.info:
                add_element(info, "DeviceID", device_id)