import pytest

from gbmessage.device_control import (
    AlarmCmdInfoType,
    DeviceControlRequestMessage,
    DeviceControlRequestMessageAlarmCmd,
    DeviceControlRequestMessageDeviceUpgrade,
    DeviceControlRequestMessageDragZoomIn,
    DeviceControlRequestMessageDragZoomOut,
    DeviceControlRequestMessageFormatSDCard,
    DeviceControlRequestMessageGuardCmd,
    DeviceControlRequestMessageHomePosition,
    DeviceControlRequestMessageIFrameCmd,
    DeviceControlRequestMessagePTZCmd,
    DeviceControlRequestMessagePtzPreciseCtrl,
    DeviceControlRequestMessageRecordCmd,
    DeviceControlRequestMessageTargetTrack,
    DeviceControlRequestMessageTeleBoot,
    DeviceControlResponseMessage,
    DeviceUpgradeType,
    DragZoomType,
    PTZCommand,
    PTZPreciseCtrlType,
    PtzCmdParams,
)
from gbmessage.message_base import MessageError
from gbmessage.types import (
    GuardType,
    MessageCmdType,
    MessageRootType,
    RecordType,
    ResultType,
    TargetTraceType,
)

DEVICE = "00000000000000000001"


def _reload(message):
    message.parse_to_xml()
    return type(message).from_xml(message.to_string())


def _control(body):
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f"<Control><CmdType>DeviceControl</CmdType><SN>7</SN><DeviceID>{DEVICE}</DeviceID>{body}</Control>"
    )


def test_ptz_command_hex_round_trip():
    cmd = PTZCommand(address=0x123, code=0x29, data1=10, data2=20, zoom=3)
    text = cmd.to_hex()
    assert len(text) == 16
    assert text.startswith("A5")
    assert PTZCommand.from_hex(text) == cmd
    assert PTZCommand.from_hex(text.lower()) == cmd


def test_ptz_command_rejects_bad_checksum():
    text = PTZCommand(code=1).to_hex()
    last = int(text[-2:], 16)
    corrupted = text[:-2] + f"{(last + 1) % 256:02X}"
    with pytest.raises(ValueError):
        PTZCommand.from_hex(corrupted)


@pytest.mark.parametrize("text", [None, "", "A50F", "B50F000000000000", "zz" * 8])
def test_ptz_command_rejects_malformed(text):
    with pytest.raises(ValueError):
        PTZCommand.from_hex(text)


def test_ptz_command_range_checked():
    with pytest.raises(ValueError):
        PTZCommand(zoom=16)


def test_ptz_message_round_trip():
    cmd = PTZCommand(address=1, code=0x82, data2=5)
    msg = DeviceControlRequestMessagePTZCmd(
        DEVICE, cmd, PtzCmdParams(preset_name="gate"), extra=["a", "", "b"]
    )
    loaded = _reload(msg)
    assert loaded.root_type is MessageRootType.Control
    assert loaded.cmd_type is MessageCmdType.DeviceControl
    assert loaded.device_id == DEVICE
    assert loaded.ptz_cmd == cmd
    assert loaded.params == PtzCmdParams(preset_name="gate")
    assert loaded.extra_info == ["a", "b"]


def test_ptz_message_without_params():
    loaded = _reload(DeviceControlRequestMessagePTZCmd(DEVICE, PTZCommand(code=4)))
    assert loaded.params is None
    assert loaded.ptz_cmd.code == 4


def test_ptz_message_missing_command():
    with pytest.raises(MessageError, match="PTZCmdType not found"):
        DeviceControlRequestMessagePTZCmd.from_xml(_control(""))


def test_ptz_message_invalid_command():
    with pytest.raises(MessageError, match="Invalid PTZ command"):
        DeviceControlRequestMessagePTZCmd.from_xml(_control("<PTZCmd>nothex</PTZCmd>"))


def test_base_request_reads_extra_info():
    msg = DeviceControlRequestMessage.from_xml(_control("<ExtraInfo>x</ExtraInfo><ExtraInfo>y</ExtraInfo>"))
    assert msg.extra_info == ["x", "y"]
    assert msg.sn == 7


def test_tele_boot_round_trip_and_missing():
    loaded = _reload(DeviceControlRequestMessageTeleBoot(DEVICE))
    assert loaded.xml.find("TeleBoot") is not None
    with pytest.raises(MessageError, match="TeleBoot not found"):
        DeviceControlRequestMessageTeleBoot.from_xml(_control(""))


def test_record_cmd_round_trip():
    loaded = _reload(DeviceControlRequestMessageRecordCmd(DEVICE, RecordType.StopRecord, 2))
    assert loaded.record_type is RecordType.StopRecord
    assert loaded.stream_number == 2


def test_record_cmd_missing():
    with pytest.raises(MessageError, match="RecordType not found"):
        DeviceControlRequestMessageRecordCmd.from_xml(_control("<StreamNumber>1</StreamNumber>"))


def test_guard_cmd_round_trip_and_missing():
    loaded = _reload(DeviceControlRequestMessageGuardCmd(DEVICE, GuardType.ResetGuard))
    assert loaded.guard_type is GuardType.ResetGuard
    with pytest.raises(MessageError, match="GuardType not found"):
        DeviceControlRequestMessageGuardCmd.from_xml(_control("<GuardCmd>bogus</GuardCmd>"))


def test_alarm_cmd_round_trip():
    info = AlarmCmdInfoType(alarm_method="2", alarm_type="1")
    loaded = _reload(DeviceControlRequestMessageAlarmCmd(DEVICE, info))
    assert loaded.info == info
    assert loaded.alarm_cmd == DeviceControlRequestMessageAlarmCmd().alarm_cmd


def test_alarm_cmd_missing():
    with pytest.raises(MessageError, match="AlarmCmd not found"):
        DeviceControlRequestMessageAlarmCmd.from_xml(_control(""))


def test_iframe_writes_both_tags_and_accepts_legacy():
    msg = DeviceControlRequestMessageIFrameCmd(DEVICE)
    msg.parse_to_xml()
    assert msg.xml.find("IFrameCmd") is not None
    assert msg.xml.find("IFameCmd") is not None
    legacy = DeviceControlRequestMessageIFrameCmd.from_xml(_control("<IFameCmd>Send</IFameCmd>"))
    assert legacy.is_valid is True
    with pytest.raises(MessageError, match="IFrameCmd not found"):
        DeviceControlRequestMessageIFrameCmd.from_xml(_control(""))


def test_drag_zoom_in_and_out_round_trip():
    drag = DragZoomType(length=100, width=50, mid_point_x=10, mid_point_y=20, length_x=30, length_y=40)
    zoom_in = _reload(DeviceControlRequestMessageDragZoomIn(DEVICE, drag))
    assert zoom_in.drag_zoom == drag
    zoom_out_msg = DeviceControlRequestMessageDragZoomOut(DEVICE, drag)
    zoom_out = _reload(zoom_out_msg)
    assert zoom_out.drag_zoom == drag
    assert zoom_out_msg.xml.find("DragZoomOut") is not None
    assert zoom_out_msg.xml.find("DragZoomIn") is None


def test_drag_zoom_missing():
    with pytest.raises(MessageError, match="DragZoomIn not found"):
        DeviceControlRequestMessageDragZoomIn.from_xml(_control(""))


def test_home_position_round_trip():
    loaded = _reload(DeviceControlRequestMessageHomePosition(DEVICE, 1, preset_index=3, reset_time=0))
    assert loaded.enabled == 1
    assert loaded.preset_index == 3
    assert loaded.reset_time == 0


def test_home_position_optional_fields_omitted():
    msg = DeviceControlRequestMessageHomePosition(DEVICE, 0)
    loaded = _reload(msg)
    assert msg.xml.find("HomePosition/ResetTime") is None
    assert loaded.preset_index is None
    assert loaded.reset_time is None


def test_home_position_errors():
    with pytest.raises(MessageError, match="HomePosition not found"):
        DeviceControlRequestMessageHomePosition.from_xml(_control(""))
    with pytest.raises(MessageError, match="Enabled not found"):
        DeviceControlRequestMessageHomePosition.from_xml(
            _control("<HomePosition><ResetTime>5</ResetTime></HomePosition>")
        )


def test_ptz_precise_ctrl_round_trip():
    ctrl = PTZPreciseCtrlType(pan=12.5, tilt=-3.25, zoom=2.0)
    loaded = _reload(DeviceControlRequestMessagePtzPreciseCtrl(DEVICE, ctrl))
    assert loaded.ptz_precise_ctrl == ctrl
    with pytest.raises(MessageError, match="PTZPreciseCtrl not found"):
        DeviceControlRequestMessagePtzPreciseCtrl.from_xml(_control("<PTZPreciseCtrl/>"))


def test_device_upgrade_round_trip():
    upgrade = DeviceUpgradeType(
        firmware="v2", file_url="http://localhost/fw.bin", manufacturer="acme", session_id="s1"
    )
    loaded = _reload(DeviceControlRequestMessageDeviceUpgrade(DEVICE, upgrade))
    assert loaded.device_upgrade == upgrade
    with pytest.raises(MessageError):
        DeviceControlRequestMessageDeviceUpgrade.from_xml(_control(""))


def test_format_sd_card_round_trip_and_missing():
    loaded = _reload(DeviceControlRequestMessageFormatSDCard(DEVICE, 2))
    assert loaded.index == 2
    with pytest.raises(MessageError, match="FormatSDCard not found"):
        DeviceControlRequestMessageFormatSDCard.from_xml(_control(""))


def test_target_track_round_trip():
    area = DragZoomType(length=1, width=2, mid_point_x=3, mid_point_y=4, length_x=5, length_y=6)
    msg = DeviceControlRequestMessageTargetTrack(DEVICE, TargetTraceType.Manual, "00000000000000000002", area)
    loaded = _reload(msg)
    assert loaded.target_trace is TargetTraceType.Manual
    assert loaded.device_id2 == "00000000000000000002"
    assert loaded.target_area == area


def test_target_track_without_area_and_missing():
    loaded = _reload(DeviceControlRequestMessageTargetTrack(DEVICE, TargetTraceType.Stop))
    assert loaded.target_area is None
    with pytest.raises(MessageError, match="TargetTrack trace not found"):
        DeviceControlRequestMessageTargetTrack.from_xml(_control(""))


def test_response_round_trip():
    loaded = _reload(DeviceControlResponseMessage(DEVICE, ResultType.Error, reason="busy"))
    assert loaded.root_type is MessageRootType.Response
    assert loaded.result is ResultType.Error
    assert loaded.reason == "busy"


def test_response_invalid_result():
    msg = DeviceControlResponseMessage(DEVICE, ResultType.invalid)
    with pytest.raises(MessageError, match="Result invalid"):
        msg.parse_to_xml()
    assert msg.xml is None


def test_response_missing_result():
    text = (
        '<?xml version="1.0"?><Response><CmdType>DeviceControl</CmdType>'
        f"<SN>1</SN><DeviceID>{DEVICE}</DeviceID></Response>"
    )
    with pytest.raises(MessageError, match="Result not found"):
        DeviceControlResponseMessage.from_xml(text)