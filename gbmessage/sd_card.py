"""Storage card status query and response."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from .message_base import MessageBase
from .types import MessageCmdType, MessageRootType, ResultType
from .xmlfields import add_element, read_enum, read_int, read_text


@dataclass
class SdCardInfoType:
    """State of one storage card."""

    id: int = 0
    hdd_name: str = ""
    status: str = ""
    format_progress: int = 0
    capacity: int = 0
    free_space: int = 0


_INT_FIELDS = (("ID", "id"), ("FormatProgress", "format_progress"), ("Capacity", "capacity"), ("FreeSpace", "free_space"))
_TEXT_FIELDS = (("HddName", "hdd_name"), ("Status", "status"))
_WRITE_ORDER = (
    ("ID", "id"),
    ("HddName", "hdd_name"),
    ("Status", "status"),
    ("FormatProgress", "format_progress"),
    ("Capacity", "capacity"),
    ("FreeSpace", "free_space"),
)


def _load_card(element):
    card = SdCardInfoType()
    for tag, attr in _INT_FIELDS:
        value = read_int(element, tag)
        if value is not None:
            setattr(card, attr, value)
    for tag, attr in _TEXT_FIELDS:
        value = read_text(element, tag)
        if value is not None:
            setattr(card, attr, value)
    return card


class SdCardRequestMessage(MessageBase):
    """Asks a device for the status of its storage cards."""

    def __init__(self, device_id=""):
        super().__init__(MessageRootType.Query, MessageCmdType.SDCardStatus, device_id=device_id)


class SdCardResponseMessage(MessageBase):
    """Status of each storage card of a device."""

    def __init__(self, device_id="", sum_num=0, sd_cards=None, result=ResultType.OK, reason=""):
        super().__init__(
            MessageRootType.Response, MessageCmdType.SDCardStatus, device_id=device_id, reason=reason
        )
        self.sum_num = sum_num
        self.sd_cards = list(sd_cards) if sd_cards else []
        self.result = result

    def load_detail(self):
        result = read_enum(self.xml, "Result", ResultType)
        if result is not None:
            self.result = result
        sum_num = read_int(self.xml, "SumNum")
        if sum_num is not None:
            self.sum_num = sum_num
        cards = self.xml.find("SDCardStatusInfo")
        if cards is not None:
            self.sd_cards.extend(_load_card(item) for item in cards.findall("Item"))

    def parse_detail(self):
        add_element(self.xml, "Result", self.result)
        add_element(self.xml, "SumNum", self.sum_num)
        if not self.sd_cards:
            return
        cards = ET.SubElement(self.xml, "SDCardStatusInfo")
        for card in self.sd_cards:
            item = ET.SubElement(cards, "Item")
            for tag, attr in _WRITE_ORDER:
                add_element(item, tag, getattr(card, attr))