"""Device status query and response."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from .message_base import MessageBase, MessageError
from .types import MessageCmdType, MessageRootType, OnlineType, ResultType, StatusType
from .xmlfields import add_element, read_all_texts, read_enum, read_text


@dataclass
class AlarmStatusItem:
    """Duty state of one alarm device."""

    device_id: str = ""
    duty_status: str = ""


def _read_alarm_status(element):
    return [
        AlarmStatusItem(
            device_id=read_text(item, "DeviceID") or "",
            duty_status=read_text(item, "DutyStatus") or "",
        )
        for item in element.findall("Item")
    ]


def _write_alarm_status(parent, items):
    element = ET.SubElement(parent, "Alarmstatus")
    element.set("Num", str(len(items)))
    for entry in items:
        item = ET.SubElement(element, "Item")
        add_element(item, "DeviceID", entry.device_id)
        add_element(item, "DutyStatus", entry.duty_status)


class DeviceStatusMessageRequest(MessageBase):
    """Asks a device for its running state."""

    def __init__(self, device_id=""):
        super().__init__(MessageRootType.Query, MessageCmdType.DeviceStatus, device_id=device_id)


class DeviceStatusMessageResponse(MessageBase):
    """Online state, working state, encoding, recording and alarm duty of a device."""

    def __init__(
        self,
        device_id="",
        result=ResultType.OK,
        online=OnlineType.ONLINE,
        status=ResultType.OK,
        reason="",
        encode=None,
        record=None,
        device_time="",
        alarm_status=None,
        info=None,
    ):
        super().__init__(
            MessageRootType.Response, MessageCmdType.DeviceStatus, device_id=device_id, reason=reason
        )
        self.result = result
        self.online = online
        self.status = status
        self.encode = encode
        self.record = record
        self.device_time = device_time
        self.alarm_status = list(alarm_status) if alarm_status else []
        self.info = list(info) if info else []

    def load_detail(self):
        result = read_enum(self.xml, "Result", ResultType)
        if result is None:
            raise MessageError("The Result field invalid")
        online = read_enum(self.xml, "Online", OnlineType)
        if online is None:
            raise MessageError("The Online field invalid")
        status = read_enum(self.xml, "Status", ResultType)
        if status is None:
            raise MessageError("The Status field invalid")
        self.result, self.online, self.status = result, online, status
        encode = read_enum(self.xml, "Encode", StatusType)
        if encode is not None:
            self.encode = encode
        record = read_enum(self.xml, "Record", StatusType)
        if record is not None:
            self.record = record
        device_time = read_text(self.xml, "DeviceTime")
        if device_time is not None:
            self.device_time = device_time
        alarm_status = self.xml.find("Alarmstatus")
        if alarm_status is not None:
            self.alarm_status.extend(_read_alarm_status(alarm_status))
        self.info.extend(read_all_texts(self.xml, "Info"))

    def parse_detail(self):
        if self.result is ResultType.invalid:
            raise MessageError("The Result field invalid")
        if self.online is OnlineType.invalid:
            raise MessageError("The Online field invalid")
        if self.status is ResultType.invalid:
            raise MessageError("The Status field invalid")
        add_element(self.xml, "Result", self.result)
        add_element(self.xml, "Online", self.online)
        add_element(self.xml, "Status", self.status)
        # The response always carries a Reason element, even when it is empty.
        if self.xml.find("Reason") is None:
            add_element(self.xml, "Reason", self.reason)
        if self.encode is not None and self.encode is not StatusType.invalid:
            add_element(self.xml, "Encode", self.encode)
        if self.record is not None and self.record is not StatusType.invalid:
            add_element(self.xml, "Record", self.record)
        if self.device_time:
            add_element(self.xml, "DeviceTime", self.device_time)
        if self.alarm_status:
            _write_alarm_status(self.xml, self.alarm_status)
        for text in self.info:
            add_element(self.xml, "Info", text)