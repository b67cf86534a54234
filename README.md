# gbmessage

`gbmessage` builds and parses the XML bodies (MANSCDP) that GB/T 28181
video surveillance platforms and devices exchange in SIP `MESSAGE`
requests. It covers queries, controls, notifications and responses:
keepalive, broadcast, catalog, device info and status, device control
(PTZ, tele-boot, record, guard, alarm reset, I-frame, drag zoom, home
position, precise PTZ, upgrade, SD card formatting, target tracking),
device configuration and configuration download, presets, home position,
cruise tracks, PTZ position, SD card status, alarms, record info, mobile
position and other notifications.

It uses only the standard library.

## Installation

```
pip install gbmessage
```

## Building a message

Every message class derives from `gbmessage.message_base.MessageBase`.
Set its fields, call `parse_to_xml`, then `to_string` for the body:

```python
from gbmessage.keepalive import KeepaliveMessageRequest
from gbmessage.types import ResultType

msg = KeepaliveMessageRequest("11111111111111111111", ResultType.OK)
msg.sn = 7
msg.parse_to_xml()
body = msg.to_string()
```

`parse_to_xml` keeps an element tree that was already built; pass
`coercion=True` to rebuild it from the current fields. `to_string` returns
an indented document as a `str`, with an XML declaration naming the
message's `encoding` (`GB2312` or `GBK` when set to those, `UTF-8`
otherwise). It does not convert the text: to get the bytes to send, encode
it yourself, for instance with `gbmessage.types.utf8_to_gbk` or
`utf8_to_gb2312`. When the body, encoded in that character set, is larger
than 8 × 1024 − 500 bytes, `to_string` raises `PayloadTooBigError`.

Elements that the standard does not define can be attached as
`ExtendData(key, value, children)` through `extend` or `append_extend`;
they are appended, nested as given, after the message's own fields.

`str(msg)` gives a short label such as `[Notify->Keepalive:7] `.

## Parsing a message

`from_xml` takes a received body as `bytes` or `str`, reads the encoding
from its XML declaration (decoding GBK and GB2312 bytes accordingly),
builds an instance of the class it is called on and loads it:

```python
from gbmessage.catalog import CatalogResponseMessage

response = CatalogResponseMessage.from_xml(body)
print(response.root_type, response.cmd_type, response.sn, response.device_id)
for item in response.items:
    print(item.device_id, item.name, item.status)
```

Loading fills the root type (`MessageRootType`), the command
(`MessageCmdType`), the serial number, the device id and the reason, then
the message's own fields through its `load_detail`. Malformed XML, an
unknown root element, or a missing required field raises `MessageError`;
the reason is also kept in `error_message`, and `is_valid` stays `False`.
Writing a message that lacks something it needs (an invalid result, no
session id, no configuration section, ...) raises `MessageError` too.

## Modules

- `gbmessage.types`: the protocol enumerations (`MessageRootType`,
  `MessageCmdType`, `CharEncodingType`, `ResultType`, `OnlineType`,
  `StatusType`, `RecordType`, `GuardType`, `ItemEventType`,
  `TargetTraceType`, and the flag set `DeviceConfigType`), the text
  conversions `get_root_type`, `get_root_type_string`, `get_cmd_type`,
  `get_cmd_type_string`, `get_char_encoding_type`, and the GBK/GB2312
  conversions `utf8_to_gbk`, `gbk_to_utf8`, `utf8_to_gb2312`,
  `gb2312_to_utf8`.
- `gbmessage.xmlfields`: element helpers `add_element`, `read_text`,
  `read_int`, `read_float`, `read_enum`, `read_all_texts`.
- `gbmessage.message_base`: `MessageBase`, `ExtendData`, `MessageError`,
  `PayloadTooBigError`.
- Message modules: `keepalive`, `broadcast`, `catalog`, `device_info`,
  `device_status`, `mobile_position`, `home_position`, `device_control`
  (including `PTZCommand` with `from_hex` and `to_hex`), `sd_card`,
  `device_config` (with `ConfigSection`, a generic ordered list of a
  configuration element's child fields), `config_download`, `preset`,
  `alarm`, `cruise_track`, `ptz_position`, `notify`, `record_info`.

## What it does not do

The package only turns message bodies into Python objects and back. It
does not send or receive SIP requests, register with or keep sessions to
other platforms, answer transactions, or route incoming messages to
handlers; those are left to the application that uses it.

## Running the tests

```
pip install gbmessage[test]
pytest
```