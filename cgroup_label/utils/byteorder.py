import ctypes

UINT64_SIZE = ctypes.sizeof(ctypes.c_uint64)  # 8 bytes

def decode_host_uint64(data: bytes) -> int:
    """이벤트 버퍼 앞부분의 u64 값을 호스트 바이트 순서로 해석

    BPF 프로그램이 커널에서 그대로 복사한 값이므로 네이티브 순서를 따릅니다.

    Args:
        data: 최소 8바이트 이상의 버퍼

    Raises:
        ValueError: 버퍼가 8바이트보다 짧은 경우
    """
    if len(data) < UINT64_SIZE:
        raise ValueError(f"buffer too short for u64: {len(data)} bytes")
    return ctypes.c_uint64.from_buffer_copy(bytes(data[:UINT64_SIZE])).value
