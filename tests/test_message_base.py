import pytest

from gbmessage.message_base import ExtendData, MessageBase, MessageError, PayloadTooBigError
from gbmessage.types import CharEncodingType, MessageCmdType, MessageRootType

DEVICE_ID = "00000000000000000001"


def _message(**kwargs):
    return MessageBase(MessageRootType.Query, MessageCmdType.DeviceInfo, device_id=DEVICE_ID, **kwargs)


def test_round_trip_envelope():
    msg = _message(sn=12, reason="busy")
    msg.parse_to_xml()
    loaded = MessageBase.from_xml(msg.to_string())
    assert loaded.root_type is MessageRootType.Query
    assert loaded.cmd_type is MessageCmdType.DeviceInfo
    assert loaded.sn == 12
    assert loaded.device_id == DEVICE_ID
    assert loaded.reason == "busy"
    assert loaded.is_valid


def test_utf8_declaration_by_default():
    msg = _message()
    msg.parse_to_xml()
    assert msg.to_string().startswith('<?xml version="1.0" encoding="UTF-8"?>')


def test_gbk_bytes_round_trip():
    msg = _message(reason="设备忙", encoding=CharEncodingType.gbk)
    msg.parse_to_xml()
    text = msg.to_string()
    assert text.startswith('<?xml version="1.0" encoding="GBK"?>')
    loaded = MessageBase.from_xml(text.encode("gbk"))
    assert loaded.reason == "设备忙"
    assert loaded.encoding is CharEncodingType.gbk


def test_gb2312_bytes_round_trip():
    msg = _message(reason="中文", encoding=CharEncodingType.gb2312)
    msg.parse_to_xml()
    loaded = MessageBase.from_xml(msg.to_string().encode("gb2312"))
    assert loaded.reason == "中文"
    assert loaded.encoding is CharEncodingType.gb2312


def test_to_string_empty_before_parse():
    assert _message().to_string() == ""


def test_invalid_root_raises():
    msg = MessageBase(cmd_type=MessageCmdType.Catalog)
    with pytest.raises(MessageError):
        msg.parse_to_xml()
    assert msg.xml is None


def test_invalid_cmd_raises():
    msg = MessageBase(root_type=MessageRootType.Query)
    with pytest.raises(MessageError, match="command type is invalid"):
        msg.parse_to_xml()


def test_bad_xml_raises():
    with pytest.raises(MessageError):
        MessageBase.from_xml(b"<Query><CmdType>")


def test_unknown_root_tag_raises():
    with pytest.raises(MessageError):
        MessageBase.from_xml("<Bogus><CmdType>Catalog</CmdType></Bogus>")


def test_non_numeric_sn_becomes_zero():
    loaded = MessageBase.from_xml("<Query><CmdType>Catalog</CmdType><SN>xx</SN></Query>")
    assert loaded.sn == 0
    assert loaded.cmd_type is MessageCmdType.Catalog


def test_payload_too_big():
    msg = _message(reason="x" * 8000)
    msg.parse_to_xml()
    with pytest.raises(PayloadTooBigError):
        msg.to_string()


def test_extend_data_written_nested():
    msg = _message()
    msg.append_extend(ExtendData("Custom", "v", [ExtendData("Child", "c")]))
    msg.extend([ExtendData("Second", "s"), ExtendData("", "ignored")])
    msg.parse_to_xml()
    assert msg.xml.find("Custom").text == "v"
    assert msg.xml.find("Custom/Child").text == "c"
    assert msg.xml.find("Second").text == "s"
    assert [child.tag for child in msg.xml][-2:] == ["Custom", "Second"]


def test_parse_is_cached_unless_coerced():
    msg = _message(sn=1)
    msg.parse_to_xml()
    msg.sn = 2
    msg.parse_to_xml()
    assert msg.xml.find("SN").text == "1"
    msg.parse_to_xml(True)
    assert msg.xml.find("SN").text == "2"


def test_str_format():
    assert str(_message(sn=7)) == "[Query->DeviceInfo:7] "