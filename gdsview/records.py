"""GDSII record and data type codes."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["GDSRecord", "GDSDataType", "combine_record_and_data_type"]


class GDSRecord(IntEnum):
    """Record type codes of the GDSII stream format.

    ``GDSRecord(value)`` raises ``ValueError`` for an unknown code.
    """

    HEADER = 0x00
    BGN_LIB = 0x01
    LIB_NAME = 0x02
    UNITS = 0x03
    END_LIB = 0x04
    BGN_STR = 0x05
    STR_NAME = 0x06
    END_STR = 0x07
    BOUNDARY = 0x08
    PATH = 0x09
    SREF = 0x0A
    AREF = 0x0B
    TEXT = 0x0C
    LAYER = 0x0D
    DATA_TYPE = 0x0E
    WIDTH = 0x0F
    XY = 0x10
    END_EL = 0x11
    SNAME = 0x12
    COL_ROW = 0x13
    TEXT_NODE = 0x14
    NODE = 0x15
    TEXT_TYPE = 0x16
    PRESENTATION = 0x17
    SPACING = 0x18
    STRING = 0x19
    STRANS = 0x1A
    MAG = 0x1B
    ANGLE = 0x1C
    UINTEGER = 0x1D
    USTRING = 0x1E
    REF_LIBS = 0x1F
    FONTS = 0x20
    PATH_TYPE = 0x21
    GENERATIONS = 0x22
    ATTR_TABLE = 0x23
    STY_TABLE = 0x24
    STR_TYPE = 0x25
    EL_FLAGS = 0x26
    EL_KEY = 0x27
    LINK_TYPE = 0x28
    LINK_KEYS = 0x29
    NODE_TYPE = 0x2A
    PROP_ATTR = 0x2B
    PROP_VALUE = 0x2C
    BOX = 0x2D
    BOX_TYPE = 0x2E
    PLEX = 0x2F
    BGN_EXTN = 0x30
    END_EXTN = 0x31
    TAPE_NUM = 0x32
    TAPE_CODE = 0x33
    STR_CLASS = 0x34
    RESERVED = 0x35
    FORMAT = 0x36
    MASK = 0x37
    END_MASKS = 0x38
    LIB_DIR_SIZE = 0x39
    SRF_NAME = 0x3A
    LIB_SECURE = 0x3B


class GDSDataType(IntEnum):
    """Data type codes carried in the second byte of a record header."""

    NO_DATA = 0
    BIT_ARRAY = 1
    TWO_BYTE_SIGNED_INTEGER = 2
    FOUR_BYTE_SIGNED_INTEGER = 3
    FOUR_BYTE_REAL = 4
    EIGHT_BYTE_REAL = 5
    ASCII_STRING = 6


def combine_record_and_data_type(record: GDSRecord, data_type: GDSDataType) -> int:
    """Return the 16-bit record header word: record in the high byte, data type in the low."""
    return ((int(record) & 0xFF) << 8) | (int(data_type) & 0xFF)