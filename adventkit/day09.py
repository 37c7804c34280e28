"""Disk fragmenter: compacting a disk map block by block or file by file."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

Disk = List[Optional[int]]


def parse_disk(text: str) -> Disk:
    """Expand a dense disk map into blocks holding a file id or None for free space."""
    disk: Disk = []
    for index, char in enumerate(text):
        if not char.isdigit():
            continue
        value = index // 2 if index % 2 == 0 else None
        disk.extend([value] * int(char))
    return disk


def calculate_checksum(disk: Sequence[Optional[int]]) -> int:
    """Sum of block index times file id over all occupied blocks."""
    return sum(index * value for index, value in enumerate(disk) if value is not None)


def compress_blocks(disk: Disk) -> None:
    """Move blocks one at a time from the end into the leftmost free space, in place."""
    left, right = 0, len(disk) - 1
    while True:
        while left < len(disk) and disk[left] is not None:
            left += 1
        while right >= 0 and disk[right] is None:
            right -= 1
        if left >= right:
            return
        disk[left], disk[right] = disk[right], None


@dataclass
class Block:
    """A contiguous run of blocks on the disk."""

    start: int
    size: int


@dataclass
class Drive:
    """Files keyed by id and the free gaps between them, in disk order."""

    files: Dict[int, Block] = field(default_factory=dict)
    gaps: List[Block] = field(default_factory=list)
    max_file_id: int = 0

    def checksum(self) -> int:
        """Sum of block index times file id over every file."""
        return sum(
            file_id * index
            for file_id, block in self.files.items()
            for index in range(block.start, block.start + block.size)
        )


def parse_drive(text: str) -> Drive:
    """Read a dense disk map as whole files and gaps; zero-length entries are dropped."""
    drive = Drive()
    position = 0
    for index, char in enumerate(text):
        if not char.isdigit():
            continue
        length = int(char)
        if length == 0:
            continue
        block = Block(position, length)
        if index % 2 == 0:
            drive.files[index // 2] = block
        else:
            drive.gaps.append(block)
        position += length

    if not drive.files:
        raise ValueError("the disk map holds no files")
    drive.max_file_id = max(drive.files)
    return drive


def _move_file(drive: Drive, file_id: int) -> None:
    file = drive.files.get(file_id)
    if file is None:
        return
    gap_index = next(
        (index for index, gap in enumerate(drive.gaps) if gap.size >= file.size), None
    )
    if gap_index is None:
        return
    gap = drive.gaps[gap_index]
    if gap.start >= file.start:
        return

    file.start = gap.start
    if gap.size == file.size:
        del drive.gaps[gap_index]
    else:
        gap.start += file.size
        gap.size -= file.size


def compress_files(drive: Drive) -> None:
    """Move each whole file, highest id first, into the leftmost gap that fits it."""
    for file_id in range(drive.max_file_id, 0, -1):
        _move_file(drive, file_id)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Compact a disk and report its checksum.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()

    disk = parse_disk(text)
    compress_blocks(disk)
    print(f"The block-compacted checksum is: {calculate_checksum(disk)}")

    drive = parse_drive(text)
    compress_files(drive)
    print(f"The file-compacted checksum is: {drive.checksum()}")


if __name__ == "__main__":
    main()