import struct

import pytest

from bn128kit.binfile import BinFile, open_existing


def build(file_type=b"zkey", version=1, sections=()):
    out = bytearray(file_type)
    out += struct.pack("<II", version, len(sections))
    for section_id, payload in sections:
        out += struct.pack("<IQ", section_id, len(payload))
        out += payload
    return bytes(out)


def test_sections_parsed():
    data = build(sections=[(1, b"abcd"), (2, b"xyz")])
    f = BinFile(data, "zkey", 1)
    assert f.version == 1
    assert f.file_type == "zkey"
    assert f.get_section_data(1) == b"abcd"
    assert f.get_section_data(2) == b"xyz"
    assert f.get_section_size(2) == 3


def test_repeated_section_ids():
    data = build(sections=[(3, b"first"), (3, b"second")])
    f = BinFile(data, "zkey", 1)
    assert f.get_section_data(3, 0) == b"first"
    assert f.get_section_data(3, 1) == b"second"


def test_reading_inside_section():
    payload = struct.pack("<IQ", 77, 123456789012)
    f = BinFile(build(sections=[(1, payload)]), "zkey", 1)
    f.start_read_section(1)
    assert f.read_u32_le() == 77
    assert f.read_u64_le() == 123456789012
    f.end_read_section()
    f.start_read_section(1)
    assert f.read(4) == payload[:4]


def test_end_read_section_checks_size():
    f = BinFile(build(sections=[(1, b"12345678")]), "zkey", 1)
    f.start_read_section(1)
    f.read(4)
    with pytest.raises(ValueError):
        f.end_read_section()


def test_end_read_section_without_check():
    f = BinFile(build(sections=[(1, b"12345678")]), "zkey", 1)
    f.start_read_section(1)
    f.read(4)
    f.end_read_section(check=False)
    f.start_read_section(1)
    assert f.read(8) == b"12345678"


def test_wrong_type():
    with pytest.raises(ValueError):
        BinFile(build(file_type=b"wtns"), "zkey", 1)


def test_version_too_big():
    with pytest.raises(ValueError):
        BinFile(build(version=3), "zkey", 2)


def test_missing_section():
    f = BinFile(build(sections=[(1, b"a")]), "zkey", 1)
    with pytest.raises(KeyError):
        f.start_read_section(9)
    with pytest.raises(KeyError):
        f.get_section_size(9)


def test_section_pos_too_big():
    f = BinFile(build(sections=[(1, b"a")]), "zkey", 1)
    with pytest.raises(IndexError):
        f.get_section_data(1, 1)


def test_already_reading():
    f = BinFile(build(sections=[(1, b"a"), (2, b"b")]), "zkey", 1)
    f.start_read_section(1)
    with pytest.raises(RuntimeError):
        f.start_read_section(2)


def test_truncated_section():
    data = build(sections=[(1, b"abcdef")])[:-2]
    with pytest.raises(ValueError):
        BinFile(data, "zkey", 1)


def test_from_file_and_open_existing(tmp_path):
    path = tmp_path / "sample.bin"
    path.write_bytes(build(file_type=b"wtns", version=2, sections=[(5, b"data")]))
    f = BinFile.from_file(path, "wtns", 2)
    assert f.get_section_data(5) == b"data"
    g = open_existing(str(path), "wtns", 2)
    assert g.version == 2
    assert g.get_section_size(5) == 4