"""Common envelope of MANSCDP XML messages."""

from __future__ import annotations

import copy
import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from .types import (
    CharEncodingType,
    MessageCmdType,
    MessageRootType,
    get_char_encoding_type,
    get_cmd_type,
    get_root_type,
)
from .xmlfields import read_int, read_text

_log = logging.getLogger(__name__)

MAX_PAYLOAD_SIZE = 8 * 1024 - 500

_BYTES_DECL_RE = re.compile(rb"^\s*(?:\xef\xbb\xbf)?\s*<\?xml([^>]*)\?>")
_TEXT_DECL_RE = re.compile(r"^\s*<\?xml([^>]*)\?>")


class MessageError(Exception):
    """A message could not be loaded from or written to XML."""


class PayloadTooBigError(MessageError):
    """The serialised message exceeds the allowed SIP payload size."""


@dataclass
class ExtendData:
    """An extra element appended to a message, with optional nested children."""

    key: str
    value: str = ""
    children: list = field(default_factory=list)


def _append_extend(parent, data):
    if not data.key:
        _log.warning("Invalid root or empty key in ExtendData")
        return
    element = ET.SubElement(parent, data.key)
    if data.value:
        element.text = data.value
    for child in data.children:
        _append_extend(element, child)


class MessageBase:
    """Root, command, serial number, device id and reason shared by all messages.

    Subclasses must be constructible with no arguments so ``from_xml`` can build them.
    """

    def __init__(
        self,
        root_type=MessageRootType.invalid,
        cmd_type=MessageCmdType.invalid,
        device_id=None,
        reason="",
        sn=0,
        encoding=CharEncodingType.invalid,
    ):
        self.root_type = root_type
        self.cmd_type = cmd_type
        self.device_id = device_id
        self.reason = reason
        self.sn = sn
        self.encoding = encoding
        self.xml = None
        self.error_message = ""
        self.is_valid = False
        self.extend_data = []

    @classmethod
    def from_xml(cls, data):
        """Parse ``data`` (bytes or str) and load a message of this class from it."""
        encoding = CharEncodingType.invalid
        if isinstance(data, (bytes, bytearray)):
            match = _BYTES_DECL_RE.match(bytes(data))
            if match:
                encoding = get_char_encoding_type(match.group(1).decode("ascii", errors="ignore"))
            try:
                text = bytes(data).decode(encoding.codec)
            except UnicodeDecodeError as exc:
                raise MessageError(f"payload is not valid {encoding.codec}: {exc}") from exc
        else:
            text = data
            match = _TEXT_DECL_RE.match(text)
            if match:
                encoding = get_char_encoding_type(match.group(1))
        text = _TEXT_DECL_RE.sub("", text.lstrip("\ufeff"), count=1)
        try:
            root = ET.fromstring(text)
        except ET.ParseError as exc:
            raise MessageError(f"XML parse error: {exc}") from exc
        message = cls()
        message.xml = root
        if encoding is not CharEncodingType.invalid:
            message.encoding = encoding
        message.load_from_xml()
        return message

    def _fail(self, text):
        self.error_message = text
        self.is_valid = False
        return MessageError(text)

    def load_from_xml(self):
        """Fill the message from ``self.xml``; raises MessageError on failure."""
        if self.xml is None:
            raise self._fail("no XML document to load")
        root = self.xml
        self.root_type = get_root_type(root.tag)
        if self.root_type is MessageRootType.invalid:
            raise self._fail(f"invalid root element {root.tag!r}")
        cmd = read_text(root, "CmdType")
        if cmd is not None:
            self.cmd_type = get_cmd_type(cmd)
        if root.find("SN") is not None:
            sn = read_int(root, "SN")
            self.sn = 0 if sn is None else sn
        device_id = read_text(root, "DeviceID")
        if device_id is not None:
            self.device_id = device_id
        reason = read_text(root, "Reason")
        if reason is not None:
            self.reason = reason
        try:
            self.load_detail()
        except MessageError as exc:
            raise self._fail(str(exc)) from exc
        self.is_valid = True

    def parse_to_xml(self, coercion=False):
        """Build ``self.xml`` from the fields; rebuild it when ``coercion`` is set."""
        if coercion:
            self.xml = None
        if self.xml is not None:
            return
        if self.root_type is MessageRootType.invalid:
            raise self._fail("message root type is invalid")
        if self.cmd_type is MessageCmdType.invalid:
            raise self._fail("command type is invalid")
        root = ET.Element(self.root_type.value)
        ET.SubElement(root, "CmdType").text = self.cmd_type.value
        ET.SubElement(root, "SN").text = str(self.sn)
        if self.device_id:
            ET.SubElement(root, "DeviceID").text = self.device_id
        if self.reason:
            ET.SubElement(root, "Reason").text = self.reason
        self.xml = root
        try:
            self.parse_detail()
        except MessageError as exc:
            self.xml = None
            raise self._fail(str(exc)) from exc
        for data in self.extend_data:
            _append_extend(root, data)

    def to_string(self):
        """Serialised document with declaration; empty when nothing was built."""
        if self.xml is None:
            return ""
        tree = copy.deepcopy(self.xml)
        ET.indent(tree, space="    ")
        if self.encoding in (CharEncodingType.gb2312, CharEncodingType.gbk):
            label = self.encoding.value
        else:
            label = CharEncodingType.utf8.value
        text = f'<?xml version="1.0" encoding="{label}"?>\n' + ET.tostring(tree, encoding="unicode") + "\n"
        size = len(text.encode(self.encoding.codec, errors="replace"))
        if size > MAX_PAYLOAD_SIZE:
            raise PayloadTooBigError(f"payload of {size} bytes exceeds {MAX_PAYLOAD_SIZE}")
        return text

    def extend(self, data):
        self.extend_data.extend(data)

    def append_extend(self, data):
        self.extend_data.append(data)

    def load_detail(self):
        """Read command-specific fields; the base message has none."""

    def parse_detail(self):
        """Write command-specific fields; the base message has none."""

    def __str__(self):
        return f"[{self.root_type.name}->{self.cmd_type.name}:{self.sn}] "