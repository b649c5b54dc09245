"""Reader for sectioned binary files: a 4-byte type, a version and typed sections."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Dict, List, Optional, Union

_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")


@dataclass(frozen=True)
class _Section:
    start: int
    size: int


class BinFile:
    """A parsed binary file with a read cursor.

    Layout: a 4-byte type tag, a little-endian u32 version, a u32 section
    count, then for every section a u32 id, a u64 size and its payload.
    """

    def __init__(self, data: bytes, file_type: Union[str, bytes], max_version: int) -> None:
        self._data = bytes(data)
        self.size = len(self._data)
        self._pos = 0
        self._reading: Optional[_Section] = None
        self.sections: Dict[int, List[_Section]] = {}

        expected = file_type.decode("latin-1") if isinstance(file_type, bytes) else file_type
        self.file_type = self.read(4).decode("latin-1")
        if self.file_type != expected:
            raise ValueError(
                f"Invalid file type. It should be {expected} and it is {self.file_type}"
            )

        self.version = self.read_u32_le()
        if self.version > max_version:
            raise ValueError(
                f"Invalid version. It should be <={max_version} and it is {self.version}"
            )

        n_sections = self.read_u32_le()
        for _ in range(n_sections):
            section_type = self.read_u32_le()
            section_size = self.read_u64_le()
            start = self._pos
            if start + section_size > self.size:
                raise ValueError(f"section {section_type} runs past the end of the data")
            self.sections.setdefault(section_type, []).append(_Section(start, section_size))
            self._pos += section_size

        self._pos = 0

    @classmethod
    def from_file(
        cls, path: Union[str, PathLike], file_type: Union[str, bytes], max_version: int
    ) -> "BinFile":
        return cls(Path(path).read_bytes(), file_type, max_version)

    def _section(self, section_id: int, section_pos: int) -> _Section:
        if section_id not in self.sections:
            raise KeyError(f"Section does not exist: {section_id}")
        found = self.sections[section_id]
        if not 0 <= section_pos < len(found):
            raise IndexError(
                f"Section pos too big. There are {len(found)} and it's trying to "
                f"access section: {section_pos}"
            )
        return found[section_pos]

    def start_read_section(self, section_id: int, section_pos: int = 0) -> None:
        """Move the cursor to the start of a section and mark it as being read."""
        section = self._section(section_id, section_pos)
        if self._reading is not None:
            raise RuntimeError("Already reading a section")
        self._pos = section.start
        self._reading = section

    def end_read_section(self, check: bool = True) -> None:
        """Finish the section; with ``check`` the whole section must have been read."""
        if self._reading is None:
            raise RuntimeError("Not reading a section")
        if check and self._pos - self._reading.start != self._reading.size:
            raise ValueError("Invalid section size")
        self._reading = None

    def get_section_data(self, section_id: int, section_pos: int = 0) -> bytes:
        section = self._section(section_id, section_pos)
        return self._data[section.start:section.start + section.size]

    def get_section_size(self, section_id: int, section_pos: int = 0) -> int:
        return self._section(section_id, section_pos).size

    def read(self, length: int) -> bytes:
        """The next ``length`` bytes at the cursor."""
        end = self._pos + length
        if length < 0 or end > self.size:
            raise ValueError("read past the end of the data")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def read_u32_le(self) -> int:
        return _U32.unpack(self.read(4))[0]

    def read_u64_le(self) -> int:
        return _U64.unpack(self.read(8))[0]


def open_existing(
    filename: Union[str, PathLike], file_type: Union[str, bytes], max_version: int
) -> BinFile:
    """Load and parse the file at ``filename``."""
    return BinFile.from_file(filename, file_type, max_version)