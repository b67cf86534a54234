"""Voice broadcast notification and its response."""

from __future__ import annotations

from .message_base import MessageBase, MessageError
from .types import MessageCmdType, MessageRootType, ResultType
from .xmlfields import add_element, read_enum, read_text


class BroadcastNotifyRequest(MessageBase):
    """Asks a device to start a voice broadcast from ``source_id`` to ``target_id``."""

    def __init__(self, source_id="", target_id=""):
        super().__init__(MessageRootType.Notify, MessageCmdType.Broadcast)
        self.source_id = source_id
        self.target_id = target_id

    def load_detail(self):
        source_id = read_text(self.xml, "SourceID")
        if source_id is None:
            raise MessageError("invalid parameter, SourceID missing")
        target_id = read_text(self.xml, "TargetID")
        if target_id is None:
            raise MessageError("invalid parameter, TargetID missing")
        self.source_id = source_id
        self.target_id = target_id

    def parse_detail(self):
        add_element(self.xml, "SourceID", self.source_id)
        add_element(self.xml, "TargetID", self.target_id)


class BroadcastNotifyResponse(MessageBase):
    """Result of a voice broadcast notification."""

    def __init__(self, device_id="", result=ResultType.OK):
        super().__init__(MessageRootType.Response, MessageCmdType.Broadcast, device_id=device_id)
        self.result = result

    def load_detail(self):
        result = read_enum(self.xml, "Result", ResultType)
        if result is None:
            raise MessageError("invalid parameter, Result missing")
        self.result = result

    def parse_detail(self):
        add_element(self.xml, "Result", self.result)