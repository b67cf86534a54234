from gbmessage.ptz_position import (
    PTZPositionNotifyMessage,
    PTZPositionRequestMessage,
    PTZPositionResponseMessage,
)
from gbmessage.types import MessageCmdType, MessageRootType, ResultType

DEVICE = "00000000000000000001"


def _roundtrip(message):
    message.parse_to_xml()
    return type(message).from_xml(message.to_string())


def test_request_envelope():
    loaded = _roundtrip(PTZPositionRequestMessage(DEVICE))
    assert loaded.root_type is MessageRootType.Query
    assert loaded.cmd_type is MessageCmdType.PTZPosition
    assert loaded.device_id == DEVICE


def test_response_roundtrip():
    msg = PTZPositionResponseMessage(
        DEVICE,
        pan=12.5,
        tilt=-3.25,
        zoom=2.0,
        horizontal_field_angle=60.5,
        vertical_field_angle=33.75,
        max_view_distance=150.0,
    )
    loaded = _roundtrip(msg)
    assert loaded.result is ResultType.OK
    assert loaded.pan == 12.5
    assert loaded.tilt == -3.25
    assert loaded.zoom == 2.0
    assert loaded.horizontal_field_angle == 60.5
    assert loaded.vertical_field_angle == 33.75
    assert loaded.max_view_distance == 150.0


def test_response_omits_absent_values():
    msg = PTZPositionResponseMessage(DEVICE, pan=1.5)
    msg.parse_to_xml()
    tags = [child.tag for child in msg.xml]
    assert "Pan" in tags
    assert "Tilt" not in tags
    assert "MaxViewDistance" not in tags
    loaded = PTZPositionResponseMessage.from_xml(msg.to_string())
    assert loaded.tilt is None


def test_response_error_result_roundtrip():
    loaded = _roundtrip(PTZPositionResponseMessage(DEVICE, ResultType.Error, reason="no ptz"))
    assert loaded.result is ResultType.Error
    assert loaded.reason == "no ptz"


def test_notify_roundtrip():
    msg = PTZPositionNotifyMessage(DEVICE, pan=90.0, zoom=4.5)
    loaded = _roundtrip(msg)
    assert loaded.root_type is MessageRootType.Notify
    assert loaded.pan == 90.0
    assert loaded.zoom == 4.5
    assert loaded.tilt is None
    assert msg.xml.find("Result") is None