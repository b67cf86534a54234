"""Enumerations and text helpers for GB/T 28181 MANSCDP messages."""

from __future__ import annotations

import re
from enum import Enum, Flag


class _TextEnum(Enum):
    """Enumeration whose values are the strings used on the wire."""

    @classmethod
    def from_text(cls, text):
        """Return the member matching ``text`` (case-insensitive) or ``invalid``."""
        if text is None:
            return cls["invalid"]
        wanted = text.strip().lower()
        if wanted:
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return cls["invalid"]

    @property
    def text(self):
        return self.value


class MessageRootType(_TextEnum):
    invalid = ""
    Query = "Query"
    Control = "Control"
    Notify = "Notify"
    Response = "Response"


class MessageCmdType(_TextEnum):
    invalid = ""
    DeviceControl = "DeviceControl"
    DeviceConfig = "DeviceConfig"
    DeviceStatus = "DeviceStatus"
    Catalog = "Catalog"
    DeviceInfo = "DeviceInfo"
    RecordInfo = "RecordInfo"
    Alarm = "Alarm"
    ConfigDownload = "ConfigDownload"
    PresetQuery = "PresetQuery"
    MobilePosition = "MobilePosition"
    HomePositionQuery = "HomePositionQuery"
    CruiseTrackListQuery = "CruiseTrackListQuery"
    CruiseTrackQuery = "CruiseTrackQuery"
    PTZPosition = "PTZPosition"
    SDCardStatus = "SDCardStatus"
    Keepalive = "Keepalive"
    MediaStatus = "MediaStatus"
    Broadcast = "Broadcast"
    UploadSnapShotFinished = "UploadSnapShotFinished"
    VideoUploadNotify = "VideoUploadNotify"
    DeviceUpgradeResult = "DeviceUpgradeResult"


class CharEncodingType(_TextEnum):
    invalid = ""
    utf8 = "UTF-8"
    gbk = "GBK"
    gb2312 = "GB2312"

    @property
    def codec(self):
        """Python codec name; UTF-8 when the encoding is unknown."""
        return {
            CharEncodingType.gbk: "gbk",
            CharEncodingType.gb2312: "gb2312",
        }.get(self, "utf-8")


class ResultType(_TextEnum):
    invalid = ""
    OK = "OK"
    Error = "ERROR"


class OnlineType(_TextEnum):
    invalid = ""
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"


class StatusType(_TextEnum):
    invalid = ""
    ON = "ON"
    OFF = "OFF"


class RecordType(_TextEnum):
    invalid = ""
    Record = "Record"
    StopRecord = "StopRecord"


class GuardType(_TextEnum):
    invalid = ""
    SetGuard = "SetGuard"
    ResetGuard = "ResetGuard"


class ItemEventType(_TextEnum):
    invalid = ""
    ON = "ON"
    OFF = "OFF"
    VLOST = "VLOST"
    DEFECT = "DEFECT"
    ADD = "ADD"
    DEL = "DEL"
    UPDATE = "UPDATE"


class TargetTraceType(_TextEnum):
    invalid = ""
    Auto = "Auto"
    Manual = "Manual"
    Stop = "Stop"


class DeviceConfigType(Flag):
    """Device configuration sections; combinable as a bit set."""

    invalid = 0
    BasicParam = 1 << 0
    VideoParamOpt = 1 << 1
    SVACEncodeConfig = 1 << 2
    SVACDecodeConfig = 1 << 3
    VideoParamAttribute = 1 << 4
    VideoRecordPlan = 1 << 5
    VideoAlarmRecord = 1 << 6
    PictureMask = 1 << 7
    FrameMirror = 1 << 8
    AlarmReport = 1 << 9
    OSDConfig = 1 << 10
    SnapShotConfig = 1 << 11

    @classmethod
    def from_text(cls, text):
        """Parse a ``/``-separated list of section names."""
        result = cls.invalid
        if not text:
            return result
        by_name = {name.lower(): member for name, member in cls.__members__.items() if member.value}
        for part in re.split(r"[/,\s]+", text.strip()):
            member = by_name.get(part.lower())
            if member is not None:
                result |= member
        return result

    @property
    def text(self):
        return "/".join(
            member.name for member in type(self) if member.value and (member & self) == member
        )


_ENCODING_RE = re.compile(r"""encoding\s*=\s*["']?([A-Za-z0-9_\-]+)""", re.IGNORECASE)


def get_char_encoding_type(decl):
    """Return the character encoding named in an XML declaration."""
    if not decl:
        return CharEncodingType.invalid
    match = _ENCODING_RE.search(decl)
    if not match:
        return CharEncodingType.invalid
    name = match.group(1).upper().replace("_", "-")
    if name == "UTF8":
        name = "UTF-8"
    return CharEncodingType.from_text(name)


def get_root_type(val):
    return MessageRootType.from_text(val)


def get_root_type_string(root_type):
    return root_type.value


def get_cmd_type(val):
    return MessageCmdType.from_text(val)


def get_cmd_type_string(cmd_type):
    return cmd_type.value


def utf8_to_gb2312(data):
    """Encode text as GB2312 bytes."""
    return data.encode("gb2312", errors="replace")


def gb2312_to_utf8(data):
    """Decode GB2312 bytes to text."""
    return bytes(data).decode("gb2312", errors="replace")


def gbk_to_utf8(data):
    """Decode GBK bytes to text."""
    return bytes(data).decode("gbk", errors="replace")


def utf8_to_gbk(data):
    """Encode text as GBK bytes."""
    return data.encode("gbk", errors="replace")