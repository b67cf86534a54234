import pytest

from gbmessage.catalog import (
    CatalogNotifyMessage,
    CatalogRequestMessage,
    CatalogResponseMessage,
    ItemTypeInfo,
    ItemTypeInfoDetail,
)
from gbmessage.message_base import MessageError
from gbmessage.types import ItemEventType, MessageCmdType, MessageRootType, StatusType

DEVICE = "12345678901234567890"
CHANNEL = "12345678901234567891"


def _roundtrip(message, cls):
    message.parse_to_xml()
    return cls.from_xml(message.to_string())


def test_request_roundtrip():
    request = CatalogRequestMessage(DEVICE, "2024-01-01T00:00:00", "2024-01-02T00:00:00")
    request.sn = 7
    loaded = _roundtrip(request, CatalogRequestMessage)
    assert loaded.root_type is MessageRootType.Query
    assert loaded.cmd_type is MessageCmdType.Catalog
    assert loaded.device_id == DEVICE
    assert loaded.sn == 7
    assert loaded.start_time == "2024-01-01T00:00:00"
    assert loaded.end_time == "2024-01-02T00:00:00"


def test_request_omits_empty_times():
    request = CatalogRequestMessage(DEVICE)
    request.parse_to_xml()
    assert request.xml.find("StartTime") is None
    assert request.xml.find("EndTime") is None
    assert request.xml.find("DeviceID").text == DEVICE


def test_request_without_device_id_fails():
    data = "<Query><CmdType>Catalog</CmdType><SN>1</SN></Query>"
    with pytest.raises(MessageError, match="The DeviceID field invalid"):
        CatalogRequestMessage.from_xml(data)


def test_response_roundtrip_items_and_extra():
    items = [
        ItemTypeInfo(
            device_id=CHANNEL,
            name="Camera",
            manufacturer="Maker",
            parental=0,
            parent_id=DEVICE,
            port=5060,
            status=StatusType.ON,
            longitude=120.5,
            latitude=30.25,
            event=ItemEventType.ADD,
            info=ItemTypeInfoDetail(ptz_type="1", room_type=2, horizontal_field_angle=45.5, mac="placeholder"),
        ),
        ItemTypeInfo(device_id=DEVICE, name="Second"),
    ]
    response = CatalogResponseMessage(DEVICE, 2, items, ["first", "second"])
    loaded = _roundtrip(response, CatalogResponseMessage)
    assert loaded.sum_num == 2
    assert loaded.items == items
    assert loaded.extra == ["first", "second"]


def test_response_device_list_num_attribute():
    response = CatalogResponseMessage(DEVICE, 3, [ItemTypeInfo(device_id=CHANNEL)] * 3)
    response.parse_to_xml()
    device_list = response.xml.find("DeviceList")
    assert device_list.get("Num") == "3"
    assert len(device_list.findall("Item")) == 3


def test_invalid_status_not_written():
    response = CatalogResponseMessage(DEVICE, 1, [ItemTypeInfo(device_id=CHANNEL, status=StatusType.invalid)])
    response.parse_to_xml()
    item = response.xml.find("DeviceList/Item")
    assert item.find("Status") is None
    assert item.find("DeviceID").text == CHANNEL


def test_direction_written_under_direction_tag():
    item = ItemTypeInfo(device_id=CHANNEL, info=ItemTypeInfoDetail(direction_type=3))
    response = CatalogResponseMessage(DEVICE, 1, [item])
    response.parse_to_xml()
    info = response.xml.find("DeviceList/Item/Info")
    assert info.find("Direction").text == "3"
    assert info.find("DirectionType") is None


def test_load_skips_empty_items_and_reads_status():
    data = (
        "<Response><CmdType>Catalog</CmdType><SN>1</SN>"
        f"<DeviceID>{DEVICE}</DeviceID><SumNum>2</SumNum>"
        '<DeviceList Num="2"><Item/>'
        f"<Item><DeviceID>{CHANNEL}</DeviceID><Status>OFF</Status><Unknown>x</Unknown></Item>"
        "</DeviceList></Response>"
    )
    loaded = CatalogResponseMessage.from_xml(data)
    assert len(loaded.items) == 1
    assert loaded.items[0].device_id == CHANNEL
    assert loaded.items[0].status is StatusType.OFF
    assert loaded.items[0].info is None


def test_notify_uses_notify_root():
    notify = CatalogNotifyMessage(DEVICE, 1, [ItemTypeInfo(device_id=CHANNEL, event=ItemEventType.DEL)])
    notify.parse_to_xml()
    text = notify.to_string()
    assert "<Notify>" in text
    loaded = CatalogNotifyMessage.from_xml(text)
    assert loaded.root_type is MessageRootType.Notify
    assert loaded.items[0].event is ItemEventType.DEL