"""Device information query and response."""

from __future__ import annotations

from .message_base import MessageBase, MessageError
from .types import MessageCmdType, MessageRootType, ResultType
from .xmlfields import add_element, read_all_texts, read_enum, read_int, read_text


class DeviceInfoMessageRequest(MessageBase):
    """Asks a device for its name, maker, model and firmware."""

    def __init__(self, device_id=""):
        super().__init__(MessageRootType.Query, MessageCmdType.DeviceInfo, device_id=device_id)


class DeviceInfoMessageResponse(MessageBase):
    """Device name, maker, model, firmware and channel count."""

    def __init__(
        self,
        device_id="",
        result=ResultType.OK,
        device_name="",
        manufacturer="",
        model="",
        firmware="",
        channel=None,
        info=None,
    ):
        super().__init__(MessageRootType.Response, MessageCmdType.DeviceInfo, device_id=device_id)
        self.result = result
        self.device_name = device_name
        self.manufacturer = manufacturer
        self.model = model
        self.firmware = firmware
        self.channel = channel
        self.info = list(info) if info else []

    def load_detail(self):
        result = read_enum(self.xml, "Result", ResultType)
        if result is None:
            raise MessageError("The Result field invalid")
        self.result = result
        for attr, tag in (
            ("device_name", "DeviceName"),
            ("manufacturer", "Manufacturer"),
            ("model", "Model"),
            ("firmware", "Firmware"),
        ):
            value = read_text(self.xml, tag)
            if value is not None:
                setattr(self, attr, value)
        channel = read_int(self.xml, "Channel")
        if channel is not None:
            self.channel = channel
        self.info.extend(read_all_texts(self.xml, "Info"))

    def parse_detail(self):
        if self.result is ResultType.invalid:
            raise MessageError("The Result field invalid")
        add_element(self.xml, "Result", self.result)
        add_element(self.xml, "DeviceName", self.device_name)
        add_element(self.xml, "Manufacturer", self.manufacturer)
        add_element(self.xml, "Model", self.model)
        add_element(self.xml, "Firmware", self.firmware)
        add_element(self.xml, "Channel", self.channel)
        for text in self.info:
            add_element(self.xml, "Info", text)