"""Day 9: compacting an amphipod's disk."""

from __future__ import annotations

import string

Block = int | None


def _sizes(disk_map: str) -> list[int]:
    sizes = []
    for char in disk_map.strip():
        if char not in string.digits:
            raise ValueError(f"not a digit in disk map: {char!r}")
        sizes.append(int(char))
    return sizes


def expand_disk_map(disk_map: str) -> list[Block]:
    """Lay out the disk block by block: a file id, or None for free space.

    Digits alternate between file lengths and free-space lengths; files are
    numbered from 0 in order of appearance.
    """
    blocks: list[Block] = []
    for index, size in enumerate(_sizes(disk_map)):
        if index % 2 == 0:
            blocks.extend([index // 2] * size)
        else:
            blocks.extend([None] * size)
    return blocks


def _checksum(blocks: list[Block]) -> int:
    return sum(pos * file_id for pos, file_id in enumerate(blocks) if file_id is not None)


def compact_blocks_checksum(disk_map: str) -> int:
    """Checksum after moving single blocks from the end into the leftmost gaps."""
    blocks = expand_disk_map(disk_map)
    files = [block for block in blocks if block is not None]
    free_positions = (pos for pos, block in enumerate(blocks) if block is None)
    for free_pos in free_positions:
        if free_pos >= len(files):
            break
        files.insert(free_pos, files.pop())
    return _checksum(list(files))


def _find_gap(blocks: list[Block], file_id: int, size: int) -> int | None:
    run_start: int | None = None
    run = 0
    for pos, block in enumerate(blocks):
        if block == file_id:
            return None
        if block is None:
            if run_start is None:
                run_start = pos
            run += 1
            if run >= size:
                return run_start
        else:
            run = 0
            run_start = None
    return None


def compact_files_checksum(disk_map: str) -> int:
    """Checksum after moving whole files, highest id first, into the leftmost fitting gap."""
    blocks: list[Block] = []
    spans: list[tuple[int, int]] = []
    for index, size in enumerate(_sizes(disk_map)):
        if index % 2 == 0:
            spans.append((len(blocks), size))
            blocks.extend([index // 2] * size)
        else:
            blocks.extend([None] * size)
    for file_id in reversed(range(len(spans))):
        start, size = spans[file_id]
        target = _find_gap(blocks, file_id, size)
        if target is not None:
            blocks[target:target + size] = blocks[start:start + size]
            blocks[start:start + size] = [None] * size
    return _checksum(blocks)