"""PTZ position query, response and notification."""

from __future__ import annotations

from .message_base import MessageBase
from .types import MessageCmdType, MessageRootType, ResultType
from .xmlfields import add_element, read_enum, read_float

_POSITION_FIELDS = (
    ("Pan", "pan"),
    ("Tilt", "tilt"),
    ("Zoom", "zoom"),
    ("HorizontalFieldAngle", "horizontal_field_angle"),
    ("VerticalFieldAngle", "vertical_field_angle"),
    ("MaxViewDistance", "max_view_distance"),
)


class _PositionFields:
    """Optional pan, tilt, zoom and field-of-view values."""

    def _init_position(self, pan, tilt, zoom, horizontal_field_angle, vertical_field_angle, max_view_distance):
        self.pan = pan
        self.tilt = tilt
        self.zoom = zoom
        self.horizontal_field_angle = horizontal_field_angle
        self.vertical_field_angle = vertical_field_angle
        self.max_view_distance = max_view_distance

    def _load_position(self):
        for tag, attr in _POSITION_FIELDS:
            value = read_float(self.xml, tag)
            if value is not None:
                setattr(self, attr, value)

    def _write_position(self):
        for tag, attr in _POSITION_FIELDS:
            add_element(self.xml, tag, getattr(self, attr))


class PTZPositionRequestMessage(MessageBase):
    """Asks a device for its precise PTZ position."""

    def __init__(self, device_id=""):
        super().__init__(MessageRootType.Query, MessageCmdType.PTZPosition, device_id=device_id)


class PTZPositionResponseMessage(_PositionFields, MessageBase):
    """Precise PTZ position reported in answer to a query."""

    def __init__(
        self,
        device_id="",
        result=ResultType.OK,
        reason="",
        pan=None,
        tilt=None,
        zoom=None,
        horizontal_field_angle=None,
        vertical_field_angle=None,
        max_view_distance=None,
    ):
        super().__init__(MessageRootType.Response, MessageCmdType.PTZPosition, device_id=device_id, reason=reason)
        self.result = result
        self._init_position(pan, tilt, zoom, horizontal_field_angle, vertical_field_angle, max_view_distance)

    def load_detail(self):
        result = read_enum(self.xml, "Result", ResultType)
        if result is not None:
            self.result = result
        self._load_position()

    def parse_detail(self):
        add_element(self.xml, "Result", self.result)
        self._write_position()


class PTZPositionNotifyMessage(_PositionFields, MessageBase):
    """Precise PTZ position pushed by a device."""

    def __init__(
        self,
        device_id="",
        reason="",
        pan=None,
        tilt=None,
        zoom=None,
        horizontal_field_angle=None,
        vertical_field_angle=None,
        max_view_distance=None,
    ):
        super().__init__(MessageRootType.Notify, MessageCmdType.PTZPosition, device_id=device_id, reason=reason)
        self._init_position(pan, tilt, zoom, horizontal_field_angle, vertical_field_angle, max_view_distance)

    def load_detail(self):
        self._load_position()

    def parse_detail(self):
        self._write_position()