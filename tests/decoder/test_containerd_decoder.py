import ctypes
import pytest
from unittest.mock import Mock

from cgroup_label.decoder.base import Decoder
from cgroup_label.decoder.containerd import ContainerdDecoder
from cgroup_label.resolver.containerd import ContainerdResolver

def pid_bytes(pid: int) -> bytes:
    """호스트 바이트 순서의 u64 버퍼"""
    return bytes(ctypes.c_uint64(pid))

@pytest.fixture
def resolver(fake_proc):
    fake_proc.add(100, "1:name=systemd:/docker/abc123\n")
    return ContainerdResolver(proc_root=str(fake_proc.root))

@pytest.fixture
def decoder(resolver):
    return ContainerdDecoder(resolver)

def test_is_decoder(decoder):
    assert isinstance(decoder, Decoder)

def test_decode_known_pid(decoder):
    """PID 버퍼를 라벨로 변환"""
    assert decoder.decode(pid_bytes(100)) == b"/docker/abc123"
    assert decoder.decode(pid_bytes(100), {"name": "containerd"}) == b"/docker/abc123"

def test_decode_unknown_pid(decoder):
    assert decoder.decode(pid_bytes(300)) == b"unknown_containerd_pid:300"

def test_decode_uses_first_eight_bytes(decoder):
    """8바이트 이후의 데이터는 무시"""
    assert decoder.decode(pid_bytes(100) + b"\xff\xff\xff\xff") == b"/docker/abc123"

def test_decode_short_buffer():
    """짧은 버퍼는 호출자 계약 위반"""
    resolver = Mock(spec=ContainerdResolver)
    decoder = ContainerdDecoder(resolver)

    with pytest.raises(ValueError):
        decoder.decode(b"\x01\x02\x03")
    resolver.resolve.assert_not_called()

def test_decode_delegates_to_resolver():
    resolver = Mock(spec=ContainerdResolver)
    resolver.resolve.return_value = b"/docker/abc123"
    decoder = ContainerdDecoder(resolver)

    assert decoder.decode(pid_bytes(4242)) == b"/docker/abc123"
    resolver.resolve.assert_called_once_with(4242)
