"""Catalog query, response and notification."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Optional

from .message_base import MessageBase, MessageError
from .types import ItemEventType, MessageCmdType, MessageRootType, StatusType
from .xmlfields import add_element, read_all_texts, read_float, read_int, read_text


@dataclass
class ItemTypeInfoDetail:
    """Extended attributes of a catalog item (the ``Info`` element)."""

    ptz_type: str = ""
    photoelectric_imaging_type: str = ""
    capture_position_type: str = ""
    room_type: Optional[int] = None
    supply_light_type: Optional[int] = None
    direction_type: Optional[int] = None
    resolution: str = ""
    stream_number_list: str = ""
    download_speed: str = ""
    svc_space_support_mode: Optional[int] = None
    svc_time_support_mode: Optional[int] = None
    ssvc_ratio_support_list: str = ""
    mobile_device_type: Optional[int] = None
    horizontal_field_angle: Optional[float] = None
    vertical_field_angle: Optional[float] = None
    max_view_distance: Optional[float] = None
    grassroots_code: str = ""
    point_type: Optional[int] = None
    point_common_name: str = ""
    mac: str = ""
    function_type: str = ""
    encode_type: str = ""
    install_time: str = ""
    management_unit: str = ""
    contact_info: str = ""
    record_save_days: Optional[int] = None
    industrial_classification: str = ""


@dataclass
class ItemTypeInfo:
    """One device or channel entry of a catalog."""

    device_id: str = ""
    name: str = ""
    manufacturer: str = ""
    model: str = ""
    civil_code: str = ""
    block: str = ""
    address: str = ""
    parental: Optional[int] = None
    parent_id: str = ""
    register_way: Optional[int] = None
    security_level_code: str = ""
    secrecy: Optional[int] = None
    ip_address: str = ""
    port: Optional[int] = None
    password: str = ""
    status: Optional[StatusType] = None
    longitude: Optional[float] = None
    latitude: Optional[float] = None
    business_group_id: str = ""
    event: Optional[ItemEventType] = None
    info: Optional[ItemTypeInfoDetail] = None


# (tag, attribute, kind) in the order they are written.
_ITEM_FIELDS = (
    ("DeviceID", "device_id", "str"),
    ("Name", "name", "str"),
    ("Manufacturer", "manufacturer", "str"),
    ("Model", "model", "str"),
    ("CivilCode", "civil_code", "str"),
    ("Block", "block", "str"),
    ("Address", "address", "str"),
    ("Parental", "parental", "int"),
    ("ParentID", "parent_id", "str"),
    ("RegisterWay", "register_way", "int"),
    ("SecurityLevelCode", "security_level_code", "str"),
    ("Secrecy", "secrecy", "int"),
    ("IPAddress", "ip_address", "str"),
    ("Port", "port", "int"),
    ("Password", "password", "str"),
    ("Status", "status", "status"),
    ("Longitude", "longitude", "float"),
    ("Latitude", "latitude", "float"),
    ("BusinessGroupID", "business_group_id", "str"),
    ("Event", "event", "event"),
)
# BusinessGroupID is written but not read back.
_ITEM_READERS = {tag: (attr, kind) for tag, attr, kind in _ITEM_FIELDS if tag != "BusinessGroupID"}

# (tag read, tag written, attribute, kind); the direction is read and written under different tags.
_DETAIL_FIELDS = (
    ("PTZType", "PTZType", "ptz_type", "str"),
    ("PhotoelectricImagingType", "PhotoelectricImagingType", "photoelectric_imaging_type", "str"),
    ("CapturePositionType", "CapturePositionType", "capture_position_type", "str"),
    ("RoomType", "RoomType", "room_type", "int"),
    ("SupplyLightType", "SupplyLightType", "supply_light_type", "int"),
    ("DirectionType", "Direction", "direction_type", "int"),
    ("Resolution", "Resolution", "resolution", "str"),
    ("StreamNumberList", "StreamNumberList", "stream_number_list", "str"),
    ("DownloadSpeed", "DownloadSpeed", "download_speed", "str"),
    ("SVCSpaceSupportMode", "SVCSpaceSupportMode", "svc_space_support_mode", "int"),
    ("SVCTimeSupportMode", "SVCTimeSupportMode", "svc_time_support_mode", "int"),
    ("SSVCRatioSupportList", "SSVCRatioSupportList", "ssvc_ratio_support_list", "str"),
    ("MobileDeviceType", "MobileDeviceType", "mobile_device_type", "int"),
    ("HorizontalFieldAngle", "HorizontalFieldAngle", "horizontal_field_angle", "float"),
    ("VerticalFieldAngle", "VerticalFieldAngle", "vertical_field_angle", "float"),
    ("MaxViewDistance", "MaxViewDistance", "max_view_distance", "float"),
    ("GrassrootsCode", "GrassrootsCode", "grassroots_code", "str"),
    ("PointType", "PointType", "point_type", "int"),
    ("PointCommonName", "PointCommonName", "point_common_name", "str"),
    ("MAC", "MAC", "mac", "str"),
    ("FunctionType", "FunctionType", "function_type", "str"),
    ("EncodeType", "EncodeType", "encode_type", "str"),
    ("InstallTime", "InstallTime", "install_time", "str"),
    ("ManagementUnit", "ManagementUnit", "management_unit", "str"),
    ("ContactInfo", "ContactInfo", "contact_info", "str"),
    ("RecordSaveDays", "RecordSaveDays", "record_save_days", "int"),
    ("IndustrialClassification", "IndustrialClassification", "industrial_classification", "str"),
)
_DETAIL_READERS = {read_tag: (attr, kind) for read_tag, _, attr, kind in _DETAIL_FIELDS}


def _read_value(element, kind):
    if kind == "int":
        return read_int(element, None)
    if kind == "float":
        return read_float(element, None)
    text = read_text(element, None)
    if kind == "status":
        return StatusType.from_text(text)
    if kind == "event":
        return ItemEventType.from_text(text)
    return text


def _assign(target, readers, element):
    entry = readers.get(element.tag)
    if entry is None:
        return
    attr, kind = entry
    value = _read_value(element, kind)
    if value is not None:
        setattr(target, attr, value)


def _should_write(value):
    return value is not None and value != ""


def _load_item(element):
    item = ItemTypeInfo()
    for child in element:
        if child.tag == "Info":
            detail = ItemTypeInfoDetail()
            for sub in child:
                _assign(detail, _DETAIL_READERS, sub)
            item.info = detail
        else:
            _assign(item, _ITEM_READERS, child)
    return item


def _write_item(parent, item):
    element = ET.SubElement(parent, "Item")
    for tag, attr, kind in _ITEM_FIELDS:
        value = getattr(item, attr)
        if tag == "DeviceID":
            add_element(element, tag, value)
        elif kind == "status":
            if value is not None and value is not StatusType.invalid:
                add_element(element, tag, value)
        elif _should_write(value):
            add_element(element, tag, value)
    if item.info is not None:
        info = ET.SubElement(element, "Info")
        for _, write_tag, attr, _ in _DETAIL_FIELDS:
            value = getattr(item.info, attr)
            if _should_write(value):
                add_element(info, write_tag, value)


class CatalogRequestMessage(MessageBase):
    """Catalog query, optionally restricted to a time window."""

    def __init__(self, device_id="", start_time="", end_time=""):
        super().__init__(MessageRootType.Query, MessageCmdType.Catalog, device_id=device_id)
        self.start_time = start_time
        self.end_time = end_time

    def load_detail(self):
        if not self.device_id:
            raise MessageError("The DeviceID field invalid")
        start_time = read_text(self.xml, "StartTime")
        if start_time is not None:
            self.start_time = start_time
        end_time = read_text(self.xml, "EndTime")
        if end_time is not None:
            self.end_time = end_time

    def parse_detail(self):
        if self.start_time:
            add_element(self.xml, "StartTime", self.start_time)
        if self.end_time:
            add_element(self.xml, "EndTime", self.end_time)


class CatalogResponseMessage(MessageBase):
    """Catalog response carrying device items and extra info strings."""

    def __init__(self, device_id="", sum_num=0, items=None, extra=None):
        super().__init__(MessageRootType.Response, MessageCmdType.Catalog, device_id=device_id)
        self.sum_num = sum_num
        self.items = list(items) if items else []
        self.extra = list(extra) if extra else []

    def load_detail(self):
        sum_num = read_int(self.xml, "SumNum")
        if sum_num is not None:
            self.sum_num = sum_num
        device_list = self.xml.find("DeviceList")
        if device_list is not None:
            self.items.extend(_load_item(item) for item in device_list.findall("Item") if len(item))
        self.extra.extend(read_all_texts(self.xml, "ExtraInfo"))

    def parse_detail(self):
        add_element(self.xml, "SumNum", self.sum_num)
        device_list = ET.SubElement(self.xml, "DeviceList")
        device_list.set("Num", str(len(self.items)))
        for item in self.items:
            _write_item(device_list, item)
        for text in self.extra:
            add_element(self.xml, "ExtraInfo", text)


class CatalogNotifyMessage(CatalogResponseMessage):
    """Catalog change notification; same body as the response."""

    def __init__(self, device_id="", sum_num=0, items=None, extra=None):
        super().__init__(device_id, sum_num, items, extra)
        self.root_type = MessageRootType.Notify