"""Device configuration query and response."""

from __future__ import annotations

from .device_config import ConfigSection, config_sections
from .message_base import MessageBase, MessageError
from .types import DeviceConfigType, MessageCmdType, MessageRootType, ResultType
from .xmlfields import add_element, read_enum


class ConfigDownloadRequestMessage(MessageBase):
    """Asks a device for one or more configuration sections."""

    def __init__(self, device_id="", config_type=DeviceConfigType.invalid):
        super().__init__(MessageRootType.Query, MessageCmdType.ConfigDownload, device_id=device_id)
        self.config_type = config_type

    def load_detail(self):
        config_type = read_enum(self.xml, "ConfigType", DeviceConfigType)
        if config_type is None:
            raise MessageError("The ConfigType field invalid")
        self.config_type = config_type

    def parse_detail(self):
        if self.config_type == DeviceConfigType.invalid:
            raise MessageError("The ConfigType field invalid")
        add_element(self.xml, "ConfigType", self.config_type)


class ConfigDownloadResponseMessage(MessageBase):
    """Configuration sections reported by a device, keyed by section type."""

    def __init__(self, device_id="", result=ResultType.OK, configs=None):
        super().__init__(MessageRootType.Response, MessageCmdType.ConfigDownload, device_id=device_id)
        self.result = result
        self.configs = dict(configs) if configs else {}

    def get_config_type(self):
        """Union of the section types present."""
        config_type = DeviceConfigType.invalid
        for key in self.configs:
            config_type |= key
        return config_type

    def load_detail(self):
        result = read_enum(self.xml, "Result", ResultType)
        if result is None:
            raise MessageError("The Result field invalid")
        self.result = result
        for config_type in config_sections():
            element = self.xml.find(config_type.name)
            if element is not None:
                self.configs.setdefault(config_type, ConfigSection.from_element(element))

    def parse_detail(self):
        if self.result is ResultType.invalid:
            raise MessageError("The Result field invalid")
        if not self.configs and self.result is not ResultType.Error:
            raise MessageError("The Config is empty")
        add_element(self.xml, "Result", self.result)
        for config_type in config_sections():
            if config_type not in self.configs:
                continue
            section = self.configs[config_type]
            if section is None:
                section = ConfigSection()
            section.to_element(self.xml, config_type.name)