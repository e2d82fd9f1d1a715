import sys
import pytest
from cgroup_label.utils.byteorder import decode_host_uint64

def test_decode_native_order():
    """호스트 순서로 인코딩된 값 해석"""
    test_cases = [0, 1, 100, 4194304, 2**32, 2**64 - 1]
    for value in test_cases:
        data = value.to_bytes(8, sys.byteorder)
        assert decode_host_uint64(data) == value, f"Failed for value: {value}"

def test_decode_little_endian_layout():
    data = bytes([0x64, 0, 0, 0, 0, 0, 0, 0])
    expected = 100 if sys.byteorder == "little" else 100 << 56
    assert decode_host_uint64(data) == expected

def test_decode_accepts_bytearray_and_memoryview():
    data = (300).to_bytes(8, sys.byteorder)
    assert decode_host_uint64(bytearray(data)) == 300
    assert decode_host_uint64(memoryview(data)) == 300

def test_decode_short_buffer():
    with pytest.raises(ValueError):
        decode_host_uint64(b"")
    with pytest.raises(ValueError):
        decode_host_uint64(b"\x00" * 7)
