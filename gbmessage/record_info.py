"""Recording search query and response."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Optional

from .message_base import MessageBase, MessageError
from .types import MessageCmdType, MessageRootType
from .xmlfields import add_element, read_all_texts, read_int, read_text


@dataclass
class ItemFileType:
    """One recording found by a search."""

    device_id: str = ""
    name: str = ""
    file_path: str = ""
    address: str = ""
    start_time: str = ""
    end_time: str = ""
    secrecy: int = 0
    type: str = ""
    recorder_id: str = ""
    file_size: str = ""
    record_location: str = ""
    stream_number: Optional[int] = None


_ITEM_TEXT_FIELDS = (
    ("DeviceID", "device_id"),
    ("Name", "name"),
    ("FilePath", "file_path"),
    ("Address", "address"),
    ("StartTime", "start_time"),
    ("EndTime", "end_time"),
)
_ITEM_TRAILING_FIELDS = (
    ("Type", "type"),
    ("RecorderID", "recorder_id"),
    ("FileSize", "file_size"),
    ("RecordLocation", "record_location"),
)

_REQUEST_LEADING_FIELDS = (("FilePath", "file_path"), ("Address", "address"))
_REQUEST_TRAILING_FIELDS = (
    ("Type", "type"),
    ("RecorderID", "recorder_id"),
    ("IndistinctQuery", "indistinct_query"),
    ("AlarmMethod", "alarm_method"),
    ("AlarmType", "alarm_type"),
)


def _load_item(element):
    item = ItemFileType()
    for tag, attr in _ITEM_TEXT_FIELDS + _ITEM_TRAILING_FIELDS:
        value = read_text(element, tag)
        if value is not None:
            setattr(item, attr, value)
    secrecy = read_int(element, "Secrecy")
    if secrecy is not None:
        item.secrecy = secrecy
    item.stream_number = read_int(element, "StreamNumber")
    return item


def _write_item(parent, item):
    element = ET.SubElement(parent, "Item")
    for tag, attr in _ITEM_TEXT_FIELDS:
        value = getattr(item, attr)
        if value:
            add_element(element, tag, value)
    add_element(element, "Secrecy", item.secrecy)
    for tag, attr in _ITEM_TRAILING_FIELDS:
        value = getattr(item, attr)
        if value:
            add_element(element, tag, value)
    if item.stream_number:
        add_element(element, "StreamNumber", item.stream_number)


class RecordInfoRequestMessage(MessageBase):
    """Searches a device for recordings within a time window."""

    def __init__(
        self,
        device_id="",
        start_time="",
        end_time="",
        file_path="",
        address="",
        secrecy=None,
        type="",
        recorder_id="",
        indistinct_query="",
        alarm_method="",
        alarm_type="",
        stream_number=None,
    ):
        super().__init__(MessageRootType.Query, MessageCmdType.RecordInfo, device_id=device_id)
        self.start_time = start_time
        self.end_time = end_time
        self.file_path = file_path
        self.address = address
        self.secrecy = secrecy
        self.type = type
        self.recorder_id = recorder_id
        self.indistinct_query = indistinct_query
        self.alarm_method = alarm_method
        self.alarm_type = alarm_type
        self.stream_number = stream_number

    def load_detail(self):
        start_time = read_text(self.xml, "StartTime")
        if start_time is None:
            raise MessageError("StartTime not found")
        end_time = read_text(self.xml, "EndTime")
        if end_time is None:
            raise MessageError("EndTime not found")
        self.start_time = start_time
        self.end_time = end_time
        for tag, attr in _REQUEST_LEADING_FIELDS + _REQUEST_TRAILING_FIELDS:
            value = read_text(self.xml, tag)
            if value is not None:
                setattr(self, attr, value)
        secrecy = read_int(self.xml, "Secrecy")
        if secrecy is not None:
            self.secrecy = secrecy
        stream_number = read_int(self.xml, "StreamNumber")
        if stream_number is not None:
            self.stream_number = stream_number

    def parse_detail(self):
        if not self.start_time:
            raise MessageError("StartTime invalid")
        if not self.end_time:
            raise MessageError("EndTime invalid")
        add_element(self.xml, "StartTime", self.start_time)
        add_element(self.xml, "EndTime", self.end_time)
        for tag, attr in _REQUEST_LEADING_FIELDS:
            value = getattr(self, attr)
            if value:
                add_element(self.xml, tag, value)
        add_element(self.xml, "Secrecy", self.secrecy)
        for tag, attr in _REQUEST_TRAILING_FIELDS:
            value = getattr(self, attr)
            if value:
                add_element(self.xml, tag, value)
        if self.stream_number:
            add_element(self.xml, "StreamNumber", self.stream_number)


class RecordInfoResponseMessage(MessageBase):
    """Recordings found by a search."""

    def __init__(self, device_id="", name="", sum_num=0, record_list=None, extra_info=None):
        super().__init__(MessageRootType.Response, MessageCmdType.RecordInfo, device_id=device_id)
        self.name = name
        self.sum_num = sum_num
        self.record_list = list(record_list) if record_list else []
        self.extra_info = list(extra_info) if extra_info else []

    def load_detail(self):
        name = read_text(self.xml, "Name")
        if name is not None:
            self.name = name
        # Some devices leave SumNum out, so it is not required.
        sum_num = read_int(self.xml, "SumNum")
        if sum_num is not None:
            self.sum_num = sum_num
        records = self.xml.find("RecordList")
        if records is not None:
            self.record_list = [_load_item(item) for item in records.findall("Item") if len(item)]
        self.extra_info = read_all_texts(self.xml, "ExtraInfo")

    def parse_detail(self):
        add_element(self.xml, "Name", self.name)
        add_element(self.xml, "SumNum", self.sum_num)
        records = ET.SubElement(self.xml, "RecordList")
        records.set("Num", str(len(self.record_list)))
        for item in self.record_list:
            _write_item(records, item)
        for text in self.extra_info:
            add_element(self.xml, "ExtraInfo", text)