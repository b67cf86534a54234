"""Device control requests (PTZ, boot, record, guard, alarm, ...) and their response."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Optional

from .message_base import MessageBase, MessageError
from .types import (
    GuardType,
    MessageCmdType,
    MessageRootType,
    RecordType,
    ResultType,
    TargetTraceType,
)
from .xmlfields import add_element, read_all_texts, read_enum, read_float, read_int, read_text

_PTZ_HEADER = 0xA5
_PTZ_VERSION = 0
_TELE_BOOT = "Boot"
_IFRAME_SEND = "Send"
_RESET_ALARM = "ResetAlarm"


@dataclass(frozen=True)
class PTZCommand:
    """An 8-byte PTZ instruction as carried in the ``PTZCmd`` element."""

    address: int = 0
    code: int = 0
    data1: int = 0
    data2: int = 0
    zoom: int = 0

    def __post_init__(self):
        limits = {"address": 0xFFF, "code": 0xFF, "data1": 0xFF, "data2": 0xFF, "zoom": 0x0F}
        for name, limit in limits.items():
            value = getattr(self, name)
            if not 0 <= value <= limit:
                raise ValueError(f"{name} out of range: {value}")

    def _bytes(self):
        check = ((_PTZ_HEADER >> 4) + (_PTZ_HEADER & 0x0F) + _PTZ_VERSION) % 16
        body = bytes(
            (
                _PTZ_HEADER,
                (_PTZ_VERSION << 4) | check,
                self.address & 0xFF,
                self.code,
                self.data1,
                self.data2,
                (self.zoom << 4) | ((self.address >> 8) & 0x0F),
            )
        )
        return body + bytes((sum(body) % 256,))

    def to_hex(self):
        """Upper-case hexadecimal form of the command."""
        return self._bytes().hex().upper()

    @classmethod
    def from_hex(cls, text):
        """Parse a hexadecimal command; raises ValueError when it is malformed."""
        if text is None:
            raise ValueError("empty PTZ command")
        raw = bytes.fromhex(text.strip())
        if len(raw) != 8:
            raise ValueError(f"PTZ command must be 8 bytes, got {len(raw)}")
        if raw[0] != _PTZ_HEADER:
            raise ValueError("PTZ command does not start with A5")
        if sum(raw[:7]) % 256 != raw[7]:
            raise ValueError("PTZ command checksum mismatch")
        return cls(
            address=raw[2] | ((raw[6] & 0x0F) << 8),
            code=raw[3],
            data1=raw[4],
            data2=raw[5],
            zoom=raw[6] >> 4,
        )


@dataclass
class PtzCmdParams:
    """Names that go with preset and cruise PTZ commands."""

    preset_name: str = ""
    cruise_track_name: str = ""


@dataclass
class AlarmCmdInfoType:
    """Which alarms an alarm reset applies to."""

    alarm_method: str = ""
    alarm_type: str = ""


@dataclass
class DragZoomType:
    """Rectangle of a drag-zoom or target-track command."""

    length: int = 0
    width: int = 0
    mid_point_x: int = 0
    mid_point_y: int = 0
    length_x: int = 0
    length_y: int = 0


@dataclass
class PTZPreciseCtrlType:
    """Absolute pan, tilt and zoom."""

    pan: float = 0.0
    tilt: float = 0.0
    zoom: float = 0.0


@dataclass
class DeviceUpgradeType:
    """Firmware upgrade instruction."""

    firmware: str = ""
    file_url: str = ""
    manufacturer: str = ""
    session_id: str = ""


_DRAG_FIELDS = (
    ("Length", "length"),
    ("Width", "width"),
    ("MidPointX", "mid_point_x"),
    ("MidPointY", "mid_point_y"),
    ("LengthX", "length_x"),
    ("LengthY", "length_y"),
)


def _read_drag(element):
    drag = DragZoomType()
    for tag, attr in _DRAG_FIELDS:
        value = read_int(element, tag)
        if value is not None:
            setattr(drag, attr, value)
    return drag


def _write_drag(parent, tag, drag):
    element = ET.SubElement(parent, tag)
    for child_tag, attr in _DRAG_FIELDS:
        add_element(element, child_tag, getattr(drag, attr))


class DeviceControlRequestMessage(MessageBase):
    """Common part of device control requests: optional ``ExtraInfo`` lines."""

    def __init__(self, device_id="", extra=None):
        super().__init__(MessageRootType.Control, MessageCmdType.DeviceControl, device_id=device_id)
        self.extra_info = list(extra) if extra else []

    def load_detail(self):
        self.extra_info.extend(read_all_texts(self.xml, "ExtraInfo"))

    def parse_detail(self):
        for text in self.extra_info:
            if text:
                add_element(self.xml, "ExtraInfo", text)


class DeviceControlRequestMessagePTZCmd(DeviceControlRequestMessage):
    """PTZ control command."""

    def __init__(self, device_id="", ptz_cmd=None, params=None, extra=None):
        super().__init__(device_id, extra)
        self.ptz_cmd = ptz_cmd if ptz_cmd is not None else PTZCommand()
        self.params = params

    def load_detail(self):
        super().load_detail()
        text = read_text(self.xml, "PTZCmd")
        if text is None:
            raise MessageError("PTZCmdType not found")
        try:
            self.ptz_cmd = PTZCommand.from_hex(text)
        except ValueError as exc:
            raise MessageError("Invalid PTZ command") from exc
        element = self.xml.find("PTZCmdParams")
        if element is not None and len(element):
            self.params = PtzCmdParams(
                preset_name=read_text(element, "PresetName") or "",
                cruise_track_name=read_text(element, "CruiseTrackName") or "",
            )

    def parse_detail(self):
        super().parse_detail()
        add_element(self.xml, "PTZCmd", self.ptz_cmd.to_hex())
        if self.params is not None:
            element = ET.SubElement(self.xml, "PTZCmdParams")
            if self.params.preset_name:
                add_element(element, "PresetName", self.params.preset_name)
            if self.params.cruise_track_name:
                add_element(element, "CruiseTrackName", self.params.cruise_track_name)


class DeviceControlRequestMessageTeleBoot(DeviceControlRequestMessage):
    """Remote reboot command."""

    def load_detail(self):
        super().load_detail()
        if self.xml.find("TeleBoot") is None:
            raise MessageError("TeleBoot not found")

    def parse_detail(self):
        super().parse_detail()
        add_element(self.xml, "TeleBoot", _TELE_BOOT)


class DeviceControlRequestMessageRecordCmd(DeviceControlRequestMessage):
    """Start or stop recording."""

    def __init__(self, device_id="", record_type=RecordType.Record, stream_number=0, extra=None):
        super().__init__(device_id, extra)
        self.record_type = record_type
        self.stream_number = stream_number

    def load_detail(self):
        super().load_detail()
        record_type = read_enum(self.xml, "RecordCmd", RecordType)
        if record_type is None:
            raise MessageError("RecordType not found")
        self.record_type = record_type
        stream_number = read_int(self.xml, "StreamNumber")
        if stream_number is not None:
            self.stream_number = stream_number

    def parse_detail(self):
        super().parse_detail()
        add_element(self.xml, "RecordCmd", self.record_type)
        add_element(self.xml, "StreamNumber", self.stream_number)


class DeviceControlRequestMessageGuardCmd(DeviceControlRequestMessage):
    """Arm or disarm alarms."""

    def __init__(self, device_id="", guard_type=GuardType.SetGuard, extra=None):
        super().__init__(device_id, extra)
        self.guard_type = guard_type

    def load_detail(self):
        super().load_detail()
        guard_type = read_enum(self.xml, "GuardCmd", GuardType)
        if guard_type is None:
            raise MessageError("GuardType not found")
        self.guard_type = guard_type

    def parse_detail(self):
        super().parse_detail()
        add_element(self.xml, "GuardCmd", self.guard_type)


class DeviceControlRequestMessageAlarmCmd(DeviceControlRequestMessage):
    """Reset alarms, optionally limited to some methods and types."""

    def __init__(self, device_id="", info=None, extra=None):
        super().__init__(device_id, extra)
        self.alarm_cmd = _RESET_ALARM
        self.info = info

    def load_detail(self):
        super().load_detail()
        alarm_cmd = read_text(self.xml, "AlarmCmd")
        if alarm_cmd is None:
            raise MessageError("AlarmCmd not found")
        self.alarm_cmd = alarm_cmd
        element = self.xml.find("Info")
        if element is not None:
            self.info = AlarmCmdInfoType(
                alarm_method=read_text(element, "AlarmMethod") or "",
                alarm_type=read_text(element, "AlarmType") or "",
            )

    def parse_detail(self):
        super().parse_detail()
        add_element(self.xml, "AlarmCmd", self.alarm_cmd)
        if self.info is not None:
            element = ET.SubElement(self.xml, "Info")
            add_element(element, "AlarmMethod", self.info.alarm_method)
            add_element(element, "AlarmType", self.info.alarm_type)


class DeviceControlRequestMessageIFrameCmd(DeviceControlRequestMessage):
    """Force a key frame; written under both the current and the legacy tag."""

    def load_detail(self):
        super().load_detail()
        if self.xml.find("IFrameCmd") is None and self.xml.find("IFameCmd") is None:
            raise MessageError("IFrameCmd not found")

    def parse_detail(self):
        super().parse_detail()
        add_element(self.xml, "IFrameCmd", _IFRAME_SEND)
        add_element(self.xml, "IFameCmd", _IFRAME_SEND)


class DeviceControlRequestMessageDragZoomIn(DeviceControlRequestMessage):
    """Zoom into a dragged rectangle."""

    _tag = "DragZoomIn"

    def __init__(self, device_id="", drag_zoom=None, extra=None):
        super().__init__(device_id, extra)
        self.drag_zoom = drag_zoom if drag_zoom is not None else DragZoomType()

    def load_detail(self):
        super().load_detail()
        element = self.xml.find(self._tag)
        if element is None:
            raise MessageError(f"{self._tag} not found")
        self.drag_zoom = _read_drag(element)

    def parse_detail(self):
        super().parse_detail()
        _write_drag(self.xml, self._tag, self.drag_zoom)


class DeviceControlRequestMessageDragZoomOut(DeviceControlRequestMessageDragZoomIn):
    """Zoom out of a dragged rectangle."""

    _tag = "DragZoomOut"


class DeviceControlRequestMessageHomePosition(DeviceControlRequestMessage):
    """Enable or disable the home position."""

    def __init__(self, device_id="", enabled=0, preset_index=None, reset_time=None, extra=None):
        super().__init__(device_id, extra)
        self.enabled = enabled
        self.preset_index = preset_index
        self.reset_time = reset_time

    def load_detail(self):
        super().load_detail()
        element = self.xml.find("HomePosition")
        if element is None:
            raise MessageError("HomePosition not found")
        enabled = read_int(element, "Enabled")
        if enabled is None:
            raise MessageError("HomePosition->Enabled not found")
        self.enabled = enabled
        reset_time = read_int(element, "ResetTime")
        if reset_time is not None:
            self.reset_time = reset_time
        preset_index = read_int(element, "PresetIndex")
        if preset_index is not None:
            self.preset_index = preset_index

    def parse_detail(self):
        super().parse_detail()
        element = ET.SubElement(self.xml, "HomePosition")
        add_element(element, "Enabled", self.enabled)
        add_element(element, "ResetTime", self.reset_time)
        add_element(element, "PresetIndex", self.preset_index)


class DeviceControlRequestMessagePtzPreciseCtrl(DeviceControlRequestMessage):
    """Move to an absolute pan, tilt and zoom."""

    def __init__(self, device_id="", ptz_precise_ctrl=None, extra=None):
        super().__init__(device_id, extra)
        self.ptz_precise_ctrl = ptz_precise_ctrl if ptz_precise_ctrl is not None else PTZPreciseCtrlType()

    def load_detail(self):
        super().load_detail()
        element = self.xml.find("PTZPreciseCtrl")
        if element is None or len(element) == 0:
            raise MessageError("PTZPreciseCtrl not found")
        ctrl = PTZPreciseCtrlType()
        for tag, attr in (("Pan", "pan"), ("Tilt", "tilt"), ("Zoom", "zoom")):
            value = read_float(element, tag)
            if value is not None:
                setattr(ctrl, attr, value)
        self.ptz_precise_ctrl = ctrl

    def parse_detail(self):
        super().parse_detail()
        element = ET.SubElement(self.xml, "PTZPreciseCtrl")
        add_element(element, "Pan", self.ptz_precise_ctrl.pan)
        add_element(element, "Tilt", self.ptz_precise_ctrl.tilt)
        add_element(element, "Zoom", self.ptz_precise_ctrl.zoom)


_UPGRADE_FIELDS = (
    ("Firmware", "firmware"),
    ("FileURL", "file_url"),
    ("Manufacturer", "manufacturer"),
    ("SessionID", "session_id"),
)


class DeviceControlRequestMessageDeviceUpgrade(DeviceControlRequestMessage):
    """Upgrade the device firmware."""

    def __init__(self, device_id="", device_upgrade=None, extra=None):
        super().__init__(device_id, extra)
        self.device_upgrade = device_upgrade if device_upgrade is not None else DeviceUpgradeType()

    def load_detail(self):
        super().load_detail()
        element = self.xml.find("DeviceUpgrade")
        if element is None or len(element) == 0:
            raise MessageError("DeviceUpgrade not found")
        upgrade = DeviceUpgradeType()
        for tag, attr in _UPGRADE_FIELDS:
            value = read_text(element, tag)
            if value is not None:
                setattr(upgrade, attr, value)
        self.device_upgrade = upgrade

    def parse_detail(self):
        super().parse_detail()
        element = ET.SubElement(self.xml, "DeviceUpgrade")
        for tag, attr in _UPGRADE_FIELDS:
            add_element(element, tag, getattr(self.device_upgrade, attr))


class DeviceControlRequestMessageFormatSDCard(DeviceControlRequestMessage):
    """Format the storage card with the given index."""

    def __init__(self, device_id="", index=0, extra=None):
        super().__init__(device_id, extra)
        self.index = index

    def load_detail(self):
        super().load_detail()
        index = read_int(self.xml, "FormatSDCard")
        if index is None:
            raise MessageError("FormatSDCard not found")
        self.index = index

    def parse_detail(self):
        super().parse_detail()
        add_element(self.xml, "FormatSDCard", self.index)


class DeviceControlRequestMessageTargetTrack(DeviceControlRequestMessage):
    """Start, steer or stop target tracking."""

    def __init__(
        self,
        device_id="",
        target_trace=TargetTraceType.Auto,
        device_id2="",
        target_area: Optional[DragZoomType] = None,
        extra=None,
    ):
        super().__init__(device_id, extra)
        self.target_trace = target_trace
        self.device_id2 = device_id2
        self.target_area = target_area

    def load_detail(self):
        super().load_detail()
        target_trace = read_enum(self.xml, "TargetTrack", TargetTraceType)
        if target_trace is None:
            raise MessageError("TargetTrack trace not found")
        self.target_trace = target_trace
        device_id2 = read_text(self.xml, "DeviceID2")
        if device_id2 is not None:
            self.device_id2 = device_id2
        element = self.xml.find("TargetArea")
        if element is not None and len(element):
            self.target_area = _read_drag(element)

    def parse_detail(self):
        super().parse_detail()
        add_element(self.xml, "TargetTrack", self.target_trace)
        add_element(self.xml, "DeviceID2", self.device_id2)
        if self.target_area is not None:
            _write_drag(self.xml, "TargetArea", self.target_area)


class DeviceControlResponseMessage(MessageBase):
    """Result of a device control request."""

    def __init__(self, device_id="", result=ResultType.OK, reason=""):
        super().__init__(
            MessageRootType.Response, MessageCmdType.DeviceControl, device_id=device_id, reason=reason
        )
        self.result = result

    def load_detail(self):
        result = read_enum(self.xml, "Result", ResultType)
        if result is None:
            raise MessageError("Result not found")
        self.result = result

    def parse_detail(self):
        if self.result is ResultType.invalid:
            raise MessageError("Result invalid")
        add_element(self.xml, "Result", self.result)