"""Disk fragmenter: compacting files on a disk map."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

Block = Optional[int]


def _disk_map(text: str) -> list[int]:
    if not text:
        raise ValueError("Disk map is empty")
    for char in text:
        if char not in "0123456789":
            raise ValueError(f"Invalid digit in disk map: {char!r}")
    return [int(char) for char in text]


def layout(disk_map: Sequence[int]) -> list[Block]:
    """Expand a disk map into blocks: file ids, with None for free space."""
    blocks: list[Block] = []
    for index, length in enumerate(disk_map):
        file_id: Block = index // 2 if index % 2 == 0 else None
        blocks.extend([file_id] * length)
    return blocks


def compact_blocks(blocks: Sequence[Block]) -> list[int]:
    """Fill gaps from the left with blocks taken from the right end, one at a time."""
    if not blocks:
        raise ValueError("Disk is empty")
    compacted: list[int] = []
    left, right = 0, len(blocks) - 1
    while left <= right:
        block = blocks[left]
        if block is not None:
            compacted.append(block)
        else:
            while right > left and blocks[right] is None:
                right -= 1
            moved = blocks[right]
            if moved is not None:
                compacted.append(moved)
                right -= 1
        left += 1
    return compacted


@dataclass
class _File:
    file_id: int
    size: int
    position: int


def _files(blocks: Sequence[Block]) -> list[_File]:
    files: list[_File] = []
    for position, block in enumerate(blocks):
        if block is None:
            continue
        if files and files[-1].file_id == block:
            files[-1].size += 1
        else:
            files.append(_File(block, 1, position))
    return files


def _free_span(blocks: Sequence[Block], limit: int, size: int) -> Optional[int]:
    """Start of the first free run before ``limit`` that holds ``size`` blocks."""
    run_start, run_size = 0, 0
    for index in range(limit):
        if blocks[index] is None:
            if run_size == 0:
                run_start = index
            run_size += 1
        elif run_size > 0:
            if run_size >= size:
                break
            run_size = 0
    return run_start if run_size >= size else None


def compact_files(blocks: Sequence[Block]) -> list[Block]:
    """Move whole files, highest id first, into the leftmost gap that fits them."""
    result = list(blocks)
    for file in reversed(_files(blocks)):
        start = _free_span(result, file.position, file.size)
        if start is None:
            continue
        for offset in range(file.size):
            result[start + offset] = file.file_id
            result[file.position + offset] = None
    return result


def _checksum(blocks: Sequence[Block]) -> int:
    return sum(index * block for index, block in enumerate(blocks) if block is not None)


def part1(text: str) -> str:
    """Checksum after moving single blocks into the gaps."""
    return str(_checksum(compact_blocks(layout(_disk_map(text)))))


def part2(text: str) -> str:
    """Checksum after moving whole files into the gaps."""
    return str(_checksum(compact_files(layout(_disk_map(text)))))