# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
Adobe Swatch Exchange (.ase) coder.

Layout (all integers big-endian):

    "ASEF"  u16 major (1)  u16 minor (0)  u32 block count
    block*: u16 type  u32 payload length  payload

Block types:
    0xC001 group start  u16 name length (units + 1), UTF-16 name, 0x0000
    0xC002 group end    (empty payload)
    0x0001 color        u16 name length, UTF-16 name, 0x0000,
                        4-char model, float32 channels, u16 color type

Decoding folds the block sequence through an explicit two-state machine
(no group open / group open) so each transition can be tested alone.
Groups may not nest and must be closed before the block list ends.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import reduce
from typing import Iterator, Optional, Union

from swatchcodec.binary import ByteReader, ByteWriter, utf16_length
from swatchcodec.coders.base import PaletteCoder
from swatchcodec.errors import (
    GroupAlreadyOpenError,
    GroupNotOpenError,
    InvalidHeaderError,
    InvalidStringError,
    InvalidVersionError,
    UnknownBlockTypeError,
    UnknownColorModelError,
    UnknownColorTypeError,
)
from swatchcodec.schema import Color, ColorSpace, ColorType, Group, Palette, PaletteFormat

logger = logging.getLogger(__name__)

MAGIC = b"ASEF"
VERSION = (1, 0)

GROUP_START = 0xC001
GROUP_END = 0xC002
COLOR_BLOCK = 0x0001

_MODEL_TAGS = {
    "RGB ": ColorSpace.RGB,
    "CMYK": ColorSpace.CMYK,
    "LAB ": ColorSpace.LAB,
    "Gray": ColorSpace.GRAY,
}
_TAGS_FOR_SPACE = {space: tag for tag, space in _MODEL_TAGS.items()}

_COLOR_TYPES = {
    0: ColorType.GLOBAL,
    1: ColorType.SPOT,
    2: ColorType.NORMAL,
}
_CODES_FOR_TYPE = {t: code for code, t in _COLOR_TYPES.items()}

# ASE stores LAB lightness as a fraction; the model uses 0-100
_LAB_L_SCALE = 100.0


# =============================================================================
# Blocks
# =============================================================================


@dataclass(frozen=True, slots=True)
class GroupStartBlock:
    name: str


@dataclass(frozen=True, slots=True)
class GroupEndBlock:
    pass


@dataclass(frozen=True, slots=True)
class ColorBlock:
    color: Color


Block = Union[GroupStartBlock, GroupEndBlock, ColorBlock]


# =============================================================================
# Parser state machine
# =============================================================================


@dataclass(frozen=True, slots=True)
class NoGroupOpen:
    """Colors go to the palette's global list."""


@dataclass(frozen=True, slots=True)
class GroupOpen:
    """Colors accumulate in the named group until its end block."""
    name: str
    colors: tuple[Color, ...] = ()


@dataclass(frozen=True, slots=True)
class ParseState:
    """Everything decoded so far plus the current group state."""
    group: Union[NoGroupOpen, GroupOpen] = NoGroupOpen()
    colors: tuple[Color, ...] = ()
    groups: tuple[Group, ...] = ()


def apply_block(state: ParseState, block: Block) -> ParseState:
    """
    Single transition of the ASE group state machine.

    Raises:
        GroupAlreadyOpenError: Group start while a group is open.
        GroupNotOpenError: Group end while no group is open.
    """
    if isinstance(block, GroupStartBlock):
        if isinstance(state.group, GroupOpen):
            raise GroupAlreadyOpenError(
                f"Group '{block.name}' started while group '{state.group.name}' is open"
            )
        return ParseState(GroupOpen(block.name), state.colors, state.groups)

    if isinstance(block, GroupEndBlock):
        if not isinstance(state.group, GroupOpen):
            raise GroupNotOpenError("Group end found with no group open")
        group = Group(colors=state.group.colors, name=state.group.name)
        return ParseState(NoGroupOpen(), state.colors, state.groups + (group,))

    if isinstance(state.group, GroupOpen):
        opened = GroupOpen(state.group.name, state.group.colors + (block.color,))
        return ParseState(opened, state.colors, state.groups)
    return ParseState(state.group, state.colors + (block.color,), state.groups)


def _read_name(reader: ByteReader) -> str:
    """u16 length (code units including terminator), then a zero-terminated UTF-16BE string."""
    declared = reader.read_uint16()
    if declared == 0:
        return ""
    name = reader.read_utf16_zero_terminated()
    if utf16_length(name) + 1 != declared:
        raise InvalidStringError(
            f"Name length mismatch: header says {declared} units, found "
            f"{utf16_length(name) + 1} ('{name}')"
        )
    return name


def _read_color(reader: ByteReader) -> Color:
    name = _read_name(reader)
    model = reader.read_ascii(4)
    space = _MODEL_TAGS.get(model)
    if space is None:
        raise UnknownColorModelError(model)
    components = [reader.read_float32() for _ in range(space.component_count)]
    if space is ColorSpace.LAB:
        components[0] *= _LAB_L_SCALE
    type_code = reader.read_uint16()
    color_type = _COLOR_TYPES.get(type_code)
    if color_type is None:
        raise UnknownColorTypeError(type_code)
    return Color(space, tuple(components), name=name, color_type=color_type)


def read_blocks(reader: ByteReader, count: int, log: logging.Logger) -> Iterator[Block]:
    """Yield `count` blocks. The declared payload lengths are not validated."""
    for index in range(count):
        block_type = reader.read_uint16()
        length = reader.read_uint32()
        log.debug("ASE block %d: type 0x%04X, length %d", index, block_type, length)
        if block_type == GROUP_START:
            yield GroupStartBlock(_read_name(reader))
        elif block_type == GROUP_END:
            yield GroupEndBlock()
        elif block_type == COLOR_BLOCK:
            yield ColorBlock(_read_color(reader))
        else:
            raise UnknownBlockTypeError(block_type)


# =============================================================================
# Coder
# =============================================================================


class ASECoder(PaletteCoder):
    """Adobe Swatch Exchange palettes."""

    format = PaletteFormat.ASE
    file_extensions = ("ase",)

    def decode(self, data: bytes, *, logger: Optional[logging.Logger] = None) -> Palette:
        log = self._logger(logger)
        reader = ByteReader(data)
        magic = reader.read_bytes(4) if len(data) >= 4 else data
        if magic != MAGIC:
            raise InvalidHeaderError(f"Expected ASE magic {MAGIC!r}, got {bytes(magic)!r}")
        version = (reader.read_uint16(), reader.read_uint16())
        if version != VERSION:
            raise InvalidVersionError(f"Unsupported ASE version {version[0]}.{version[1]}")
        count = reader.read_uint32()
        log.debug("ASE: %d blocks", count)

        state = reduce(apply_block, read_blocks(reader, count, log), ParseState())
        if isinstance(state.group, GroupOpen):
            raise GroupAlreadyOpenError(f"Group '{state.group.name}' is never closed")
        if reader.has_more_data:
            log.debug("ASE: ignoring %d trailing bytes", reader.remaining)
        return Palette(colors=state.colors, groups=state.groups, format=self.format)

    def encode(self, palette: Palette, *, logger: Optional[logging.Logger] = None) -> bytes:
        log = self._logger(logger)
        writer = ByteWriter()
        writer.write_bytes(MAGIC)
        writer.write_uint16(VERSION[0])
        writer.write_uint16(VERSION[1])

        block_count = len(palette.colors) + sum(2 + len(g.colors) for g in palette.groups)
        writer.write_uint32(block_count)

        for color in palette.colors:
            _write_block(writer, COLOR_BLOCK, _color_payload(color))
        for group in palette.groups:
            _write_block(writer, GROUP_START, _name_payload(group.name))
            for color in group.colors:
                _write_block(writer, COLOR_BLOCK, _color_payload(color))
            _write_block(writer, GROUP_END, b"")

        log.debug("ASE: wrote %d blocks (%d bytes)", block_count, len(writer))
        return writer.data()


def _name_payload(name: str) -> bytes:
    writer = ByteWriter()
    writer.write_uint16(utf16_length(name) + 1)
    writer.write_utf16_zero_terminated(name)
    return writer.data()


def _color_payload(color: Color) -> bytes:
    writer = ByteWriter()
    writer.write_bytes(_name_payload(color.name))
    writer.write_ascii(_TAGS_FOR_SPACE[color.color_space])
    components = list(color.components)
    if color.color_space is ColorSpace.LAB:
        components[0] /= _LAB_L_SCALE
    for value in components:
        writer.write_float32(value)
    writer.write_uint16(_CODES_FOR_TYPE[color.color_type])
    return writer.data()


def _write_block(writer: ByteWriter, block_type: int, payload: bytes) -> None:
    writer.write_uint16(block_type)
    writer.write_uint32(len(payload))
    writer.write_bytes(payload)
