"""Alarm query, alarm notification and the notification response."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Optional

from .message_base import MessageBase, MessageError
from .types import MessageCmdType, MessageRootType, ResultType
from .xmlfields import add_element, read_all_texts, read_enum, read_float, read_int, read_text


@dataclass
class AlarmInfo:
    """Alarm type and, for some types, the event type that raised it."""

    alarm_type: Optional[int] = None
    event_type: Optional[int] = None


_REQUEST_FIELDS = (
    ("StartAlarmPriority", "start_alarm_priority"),
    ("EndAlarmPriority", "end_alarm_priority"),
    ("AlarmMethod", "alarm_method"),
    ("AlarmType", "alarm_type"),
    ("StartAlarmTime", "start_alarm_time"),
    ("EndAlarmTime", "end_alarm_time"),
)

_NOTIFY_TEXT_FIELDS = (
    ("AlarmPriority", "alarm_priority"),
    ("AlarmMethod", "alarm_method"),
    ("AlarmTime", "alarm_time"),
    ("AlarmDescription", "alarm_description"),
)


class AlarmRequestMessage(MessageBase):
    """Alarm query, filtered by priority range, method, type and time window."""

    def __init__(
        self,
        device_id="",
        start_alarm_priority="",
        end_alarm_priority="",
        alarm_method="",
        alarm_type="",
        start_alarm_time="",
        end_alarm_time="",
    ):
        super().__init__(MessageRootType.Query, MessageCmdType.Alarm, device_id=device_id)
        self.start_alarm_priority = start_alarm_priority
        self.end_alarm_priority = end_alarm_priority
        self.alarm_method = alarm_method
        self.alarm_type = alarm_type
        self.start_alarm_time = start_alarm_time
        self.end_alarm_time = end_alarm_time

    def load_detail(self):
        for tag, attr in _REQUEST_FIELDS:
            value = read_text(self.xml, tag)
            if value is not None:
                setattr(self, attr, value)

    def parse_detail(self):
        for tag, attr in _REQUEST_FIELDS:
            value = getattr(self, attr)
            if value:
                add_element(self.xml, tag, value)


class AlarmNotifyMessage(MessageBase):
    """Alarm raised by a device."""

    def __init__(
        self,
        device_id="",
        alarm_priority="",
        alarm_method="",
        alarm_time="",
        alarm_description="",
        longitude=None,
        latitude=None,
        info=None,
        extra_info=None,
    ):
        super().__init__(MessageRootType.Notify, MessageCmdType.Alarm, device_id=device_id)
        self.alarm_priority = alarm_priority
        self.alarm_method = alarm_method
        self.alarm_time = alarm_time
        self.alarm_description = alarm_description
        self.longitude = longitude
        self.latitude = latitude
        self.info = info if info is not None else AlarmInfo()
        self.extra_info = list(extra_info) if extra_info else []

    def load_detail(self):
        for tag, attr in _NOTIFY_TEXT_FIELDS:
            value = read_text(self.xml, tag)
            if value is not None:
                setattr(self, attr, value)
        latitude = read_float(self.xml, "Latitude")
        if latitude is not None:
            self.latitude = latitude
        longitude = read_float(self.xml, "Longitude")
        if longitude is not None:
            self.longitude = longitude
        info = self.xml.find("Info")
        if info is not None:
            alarm_type = read_int(info, "AlarmType")
            if alarm_type is not None:
                self.info.alarm_type = alarm_type
            param = info.find("AlarmTypeParam")
            if param is not None:
                event_type = read_int(param, "EventType")
                if event_type is not None:
                    self.info.event_type = event_type
        self.extra_info.extend(read_all_texts(self.xml, "ExtraInfo"))

    def parse_detail(self):
        for tag, attr in _NOTIFY_TEXT_FIELDS:
            add_element(self.xml, tag, getattr(self, attr))
        if self.longitude:
            add_element(self.xml, "Longitude", self.longitude)
        if self.latitude:
            add_element(self.xml, "Latitude", self.latitude)
        if self.info.alarm_type:
            info = ET.SubElement(self.xml, "Info")
            add_element(info, "AlarmType", self.info.alarm_type)
            if self.info.event_type:
                param = ET.SubElement(info, "AlarmTypeParam")
                add_element(param, "EventType", self.info.event_type)
        for text in self.extra_info:
            add_element(self.xml, "ExtraInfo", text)


class AlarmNotifyResponseMessage(MessageBase):
    """Acknowledgement of an alarm notification."""

    def __init__(self, device_id="", result=ResultType.OK, reason=""):
        super().__init__(MessageRootType.Response, MessageCmdType.Alarm, device_id=device_id, reason=reason)
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