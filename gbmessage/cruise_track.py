"""Cruise track list and cruise track queries with their responses."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from .message_base import MessageBase, MessageError
from .types import MessageCmdType, MessageRootType, ResultType
from .xmlfields import add_element, read_enum, read_int, read_text


@dataclass
class CruiseTrackListItemType:
    """Number and name of one cruise track."""

    number: int = 0
    name: str = ""


@dataclass
class CruisePointType:
    """One stop of a cruise track."""

    preset_index: int = 0
    stay_time: int = 0
    speed: int = 0


_POINT_FIELDS = (("PresetIndex", "preset_index"), ("StayTime", "stay_time"), ("Speed", "speed"))


class CruiseTrackListRequestMessage(MessageBase):
    """Asks a device for its list of cruise tracks."""

    def __init__(self, device_id=""):
        super().__init__(MessageRootType.Query, MessageCmdType.CruiseTrackListQuery, device_id=device_id)


class CruiseTrackRequestMessage(MessageBase):
    """Asks a device for the points of cruise track ``number``."""

    def __init__(self, device_id="", number=0):
        super().__init__(MessageRootType.Query, MessageCmdType.CruiseTrackQuery, device_id=device_id)
        self.number = number

    def load_detail(self):
        number = read_int(self.xml, "Number")
        if number is None:
            raise MessageError("Number not found")
        self.number = number

    def parse_detail(self):
        add_element(self.xml, "Number", self.number)


class CruiseTrackListResponseMessage(MessageBase):
    """Cruise tracks configured on a device."""

    def __init__(self, device_id="", sum_num=0, cruise_track_list=None, result=ResultType.OK, reason=""):
        super().__init__(
            MessageRootType.Response, MessageCmdType.CruiseTrackListQuery, device_id=device_id, reason=reason
        )
        self.sum_num = sum_num
        self.cruise_track_list = list(cruise_track_list) if cruise_track_list else []
        self.result = result

    def load_detail(self):
        result = read_enum(self.xml, "Result", ResultType)
        if result is not None:
            self.result = result
        sum_num = read_int(self.xml, "SumNum")
        if sum_num is not None:
            self.sum_num = sum_num
        tracks = self.xml.find("CruiseTrackList")
        if tracks is None:
            return
        for element in tracks.findall("CruiseTrack"):
            number = read_int(element, "Number")
            self.cruise_track_list.append(
                CruiseTrackListItemType(
                    number=0 if number is None else number,
                    name=read_text(element, "Name") or "",
                )
            )

    def parse_detail(self):
        add_element(self.xml, "Result", self.result)
        add_element(self.xml, "SumNum", self.sum_num)
        if not self.cruise_track_list:
            return
        tracks = ET.SubElement(self.xml, "CruiseTrackList")
        tracks.set("Num", str(len(self.cruise_track_list)))
        for track in self.cruise_track_list:
            element = ET.SubElement(tracks, "CruiseTrack")
            add_element(element, "Number", track.number)
            add_element(element, "Name", track.name)


class CruiseTrackResponseMessage(MessageBase):
    """Points of one cruise track."""

    def __init__(self, device_id="", name="", sum_num=0, cruise_points=None, result=ResultType.OK, reason=""):
        super().__init__(
            MessageRootType.Response, MessageCmdType.CruiseTrackQuery, device_id=device_id, reason=reason
        )
        self.name = name
        self.sum_num = sum_num
        self.cruise_points = list(cruise_points) if cruise_points else []
        self.result = result

    def load_detail(self):
        result = read_enum(self.xml, "Result", ResultType)
        if result is None:
            raise MessageError("Result not found")
        self.result = result
        sum_num = read_int(self.xml, "SumNum")
        if sum_num is not None:
            self.sum_num = sum_num
        name = read_text(self.xml, "Name")
        if name is not None:
            self.name = name
        points = self.xml.find("CruisePointList")
        if points is None:
            return
        for element in points.findall("CruisePoint"):
            point = CruisePointType()
            for tag, attr in _POINT_FIELDS:
                value = read_int(element, tag)
                if value is not None:
                    setattr(point, attr, value)
            self.cruise_points.append(point)

    def parse_detail(self):
        add_element(self.xml, "Result", self.result)
        add_element(self.xml, "SumNum", self.sum_num)
        if self.name:
            add_element(self.xml, "Name", self.name)
        if not self.cruise_points:
            return
        points = ET.SubElement(self.xml, "CruisePointList")
        points.set("Num", str(len(self.cruise_points)))
        for point in self.cruise_points:
            element = ET.SubElement(points, "CruisePoint")
            for tag, attr in _POINT_FIELDS:
                add_element(element, tag, getattr(point, attr))