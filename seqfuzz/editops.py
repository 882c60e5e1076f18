"""Edit operations and applying them to sequences."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Sequence


class EditType(Enum):
    """Kind of an edit operation."""

    NONE = 0
    REPLACE = 1
    INSERT = 2
    DELETE = 3


@dataclass(frozen=True)
class EditOp:
    """A single edit at a source and destination position."""

    type: EditType
    src_pos: int
    dest_pos: int


@dataclass(frozen=True)
class Opcode:
    """An edit that covers a block of the source and of the destination."""

    type: EditType
    src_begin: int
    src_end: int
    dest_begin: int
    dest_end: int


@dataclass
class Editops:
    """An ordered list of edit operations with the lengths of both sequences."""

    ops: list[EditOp] = field(default_factory=list)
    src_len: int = 0
    dest_len: int = 0

    def __len__(self) -> int:
        return len(self.ops)

    def __iter__(self) -> Iterator[EditOp]:
        return iter(self.ops)

    def __getitem__(self, index):
        return self.ops[index]

    def append(self, op: EditOp) -> None:
        self.ops.append(op)


@dataclass
class Opcodes:
    """An ordered list of opcodes with the lengths of both sequences."""

    ops: list[Opcode] = field(default_factory=list)
    src_len: int = 0
    dest_len: int = 0

    def __len__(self) -> int:
        return len(self.ops)

    def __iter__(self) -> Iterator[Opcode]:
        return iter(self.ops)

    def __getitem__(self, index):
        return self.ops[index]

    def append(self, op: Opcode) -> None:
        self.ops.append(op)


def _finish(result: list, s1: Sequence, s2: Sequence) -> Sequence:
    if isinstance(s1, str) and isinstance(s2, str):
        return "".join(result)
    if isinstance(s1, (bytes, bytearray)) and isinstance(s2, (bytes, bytearray)):
        return bytes(result)
    return result


def editops_apply(ops: Editops, s1: Sequence, s2: Sequence) -> Sequence:
    """Apply edit operations to ``s1``, taking new elements from ``s2``."""
    result: list = []
    src_pos = 0
    for op in ops:
        if src_pos < op.src_pos:
            result.extend(s1[src_pos : op.src_pos])
            src_pos = op.src_pos
        if op.type in (EditType.NONE, EditType.REPLACE):
            result.append(s2[op.dest_pos])
            src_pos += 1
        elif op.type is EditType.INSERT:
            result.append(s2[op.dest_pos])
        else:
            src_pos += 1
    result.extend(s1[src_pos:])
    return _finish(result, s1, s2)


def opcodes_apply(ops: Opcodes, s1: Sequence, s2: Sequence) -> Sequence:
    """Apply opcodes to ``s1``, taking new blocks from ``s2``."""
    result: list = []
    for op in ops:
        if op.type is EditType.NONE:
            result.extend(s1[op.src_begin : op.src_end])
        elif op.type in (EditType.REPLACE, EditType.INSERT):
            result.extend(s2[op.dest_begin : op.dest_end])
    return _finish(result, s1, s2)