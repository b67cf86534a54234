"""Mobile position subscription query."""

from __future__ import annotations

from .message_base import MessageBase
from .types import MessageCmdType, MessageRootType
from .xmlfields import add_element, read_int


class MobilePositionRequestMessage(MessageBase):
    """Asks a mobile device to report its position every ``interval`` seconds."""

    def __init__(self, device_id="", interval=5):
        super().__init__(MessageRootType.Query, MessageCmdType.MobilePosition, device_id=device_id)
        self.interval = interval

    def load_detail(self):
        interval = read_int(self.xml, "Interval")
        if interval is not None:
            self.interval = interval

    def parse_detail(self):
        add_element(self.xml, "Interval", self.interval)