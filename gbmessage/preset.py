"""Preset query and response."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from .message_base import MessageBase, MessageError
from .types import MessageCmdType, MessageRootType
from .xmlfields import add_element, read_int, read_text


@dataclass
class PresetListItem:
    """One preset position of a PTZ camera."""

    preset_id: str = ""
    preset_name: str = ""


class PresetRequestMessage(MessageBase):
    """Asks a device for its preset positions."""

    def __init__(self, device_id=""):
        super().__init__(MessageRootType.Query, MessageCmdType.PresetQuery, device_id=device_id)


class PresetResponseMessage(MessageBase):
    """Preset positions reported by a device."""

    def __init__(self, device_id="", sum_num=0, preset_list=None):
        super().__init__(MessageRootType.Response, MessageCmdType.PresetQuery, device_id=device_id)
        self.sum_num = sum_num
        self.preset_list = list(preset_list) if preset_list else []

    def load_detail(self):
        # Some devices omit SumNum, so it is not required.
        sum_num = read_int(self.xml, "SumNum")
        if sum_num is not None:
            self.sum_num = sum_num
        presets = self.xml.find("PresetList")
        if presets is None:
            raise MessageError("the PresetList node does not exist")
        for item in presets.findall("Item"):
            if len(item) == 0:
                continue
            self.preset_list.append(
                PresetListItem(
                    preset_id=read_text(item, "PresetID") or "",
                    preset_name=read_text(item, "PresetName") or "",
                )
            )

    def parse_detail(self):
        add_element(self.xml, "SumNum", self.sum_num or len(self.preset_list))
        presets = ET.SubElement(self.xml, "PresetList")
        presets.set("Num", str(len(self.preset_list)))
        for preset in self.preset_list:
            item = ET.SubElement(presets, "Item")
            add_element(item, "PresetID", preset.preset_id)
            add_element(item, "PresetName", preset.preset_name)