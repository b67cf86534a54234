"""Notifications pushed by devices: snapshots, mobile position, media status, uploads, upgrades."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .message_base import MessageBase, MessageError
from .types import MessageCmdType, MessageRootType, ResultType
from .xmlfields import add_element, read_enum, read_float, read_int, read_text

_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


def _now():
    return datetime.now().strftime(_TIME_FORMAT)


@dataclass
class ItemMobilePositionType:
    """Position of one mobile device at a capture time."""

    device_id: str = ""
    capture_time: str = ""
    longitude: float = 0.0
    latitude: float = 0.0
    speed: Optional[float] = None
    direction: Optional[float] = None
    altitude: Optional[float] = None
    height: Optional[float] = None


_OPTIONAL_POSITION_FIELDS = (
    ("Speed", "speed"),
    ("Direction", "direction"),
    ("Altitude", "altitude"),
    ("Height", "height"),
)


def _load_position(element):
    item = ItemMobilePositionType(
        device_id=read_text(element, "DeviceID") or "",
        capture_time=read_text(element, "CaptureTime") or "",
    )
    for tag, attr in (("Longitude", "longitude"), ("Latitude", "latitude")) + _OPTIONAL_POSITION_FIELDS:
        value = read_float(element, tag)
        if value is not None:
            setattr(item, attr, value)
    return item


def _write_position(parent, item):
    element = ET.SubElement(parent, "Item")
    add_element(element, "DeviceID", item.device_id)
    add_element(element, "CaptureTime", item.capture_time)
    add_element(element, "Longitude", item.longitude)
    add_element(element, "Latitude", item.latitude)
    for tag, attr in _OPTIONAL_POSITION_FIELDS:
        value = getattr(item, attr)
        if value:
            add_element(element, tag, value)


class UploadSnapShotFinishedNotifyMessage(MessageBase):
    """Tells the platform that the snapshots of a session have been uploaded."""

    def __init__(self, device_id="", session_id="", snap_shot_list=None):
        super().__init__(MessageRootType.Notify, MessageCmdType.UploadSnapShotFinished, device_id=device_id)
        self.session_id = session_id
        self.snap_shot_list = list(snap_shot_list) if snap_shot_list else []

    def load_detail(self):
        session_id = read_text(self.xml, "SessionID")
        if session_id is None:
            raise MessageError("SessionID not found")
        self.session_id = session_id
        snapshots = self.xml.find("SnapShotList")
        if snapshots is None:
            raise MessageError("SnapShotList not found")
        self.snap_shot_list = [item.text or "" for item in snapshots.findall("SnapShotFileID")]

    def parse_detail(self):
        if not self.session_id:
            raise MessageError("SessionID not found")
        add_element(self.xml, "SessionID", self.session_id)
        snapshots = ET.SubElement(self.xml, "SnapShotList")
        for file_id in self.snap_shot_list:
            add_element(snapshots, "SnapShotFileID", file_id)


class MobilePositionNotifyMessage(MessageBase):
    """Positions reported by mobile devices."""

    def __init__(self, device_id="", time="", sum_num=0, device_list=None):
        super().__init__(MessageRootType.Notify, MessageCmdType.MobilePosition, device_id=device_id)
        self.time = time
        self.sum_num = sum_num
        self.device_list = list(device_list) if device_list else []

    def load_detail(self):
        time = read_text(self.xml, "Time")
        if time is not None:
            self.time = time
        sum_num = read_int(self.xml, "SumNum")
        if sum_num is not None:
            self.sum_num = sum_num
        devices = self.xml.find("DeviceList")
        if devices is not None:
            self.device_list = [_load_position(item) for item in devices.findall("Item")]

    def parse_detail(self):
        if not self.time:
            self.time = _now()
        add_element(self.xml, "Time", self.time)
        add_element(self.xml, "SumNum", self.sum_num)
        devices = ET.SubElement(self.xml, "DeviceList")
        for item in self.device_list:
            _write_position(devices, item)


class MediaStatusNotifyMessage(MessageBase):
    """Media stream state change, such as the end of a playback."""

    def __init__(self, device_id="", notify_type=""):
        super().__init__(MessageRootType.Notify, MessageCmdType.MediaStatus, device_id=device_id)
        self.notify_type = notify_type

    def load_detail(self):
        notify_type = read_text(self.xml, "NotifyType")
        if notify_type is None:
            raise MessageError("NotifyType not found")
        self.notify_type = notify_type

    def parse_detail(self):
        if not self.notify_type:
            raise MessageError("NotifyType not found")
        add_element(self.xml, "NotifyType", self.notify_type)


class VideoUploadNotifyMessage(MessageBase):
    """Announces a video upload, optionally with the place it was taken."""

    def __init__(self, device_id="", time="", longitude=None, latitude=None):
        super().__init__(MessageRootType.Notify, MessageCmdType.VideoUploadNotify, device_id=device_id)
        self.time = time
        self.longitude = longitude
        self.latitude = latitude

    def load_detail(self):
        time = read_text(self.xml, "Time")
        if time is None:
            raise MessageError("Time not found")
        self.time = time
        longitude = read_float(self.xml, "Longitude")
        if longitude is not None:
            self.longitude = longitude
        latitude = read_float(self.xml, "Latitude")
        if latitude is not None:
            self.latitude = latitude

    def parse_detail(self):
        if not self.time:
            self.time = _now()
        add_element(self.xml, "Time", self.time)
        add_element(self.xml, "Longitude", self.longitude)
        add_element(self.xml, "Latitude", self.latitude)


class DeviceUpgradeResultNotifyMessage(MessageBase):
    """Outcome of a firmware upgrade."""

    def __init__(self, device_id="", session_id="", firmware="", result=ResultType.OK, reason=""):
        super().__init__(
            MessageRootType.Notify, MessageCmdType.DeviceUpgradeResult, device_id=device_id, reason=reason
        )
        self.session_id = session_id
        self.firmware = firmware
        self.result = result

    def load_detail(self):
        session_id = read_text(self.xml, "SessionID")
        if session_id is None:
            raise MessageError("SessionID not found")
        result = read_enum(self.xml, "Result", ResultType)
        if result is None:
            raise MessageError("Result not found")
        self.session_id = session_id
        self.result = result
        firmware = read_text(self.xml, "Firmware")
        if firmware is not None:
            self.firmware = firmware
        reason = read_text(self.xml, "UpgradeFailedReason")
        if reason is not None:
            self.reason = reason

    def parse_detail(self):
        if not self.session_id:
            raise MessageError("SessionID not found")
        if self.result is ResultType.invalid:
            raise MessageError("Result not found")
        add_element(self.xml, "SessionID", self.session_id)
        add_element(self.xml, "Result", self.result)
        add_element(self.xml, "Firmware", self.firmware)
        add_element(self.xml, "UpgradeFailedReason", self.reason)