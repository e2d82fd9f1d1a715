from typing import Any, Dict, Optional

from .base import Decoder
from ..resolver.containerd import ContainerdResolver
from ..utils.byteorder import decode_host_uint64

class ContainerdDecoder(Decoder):
    """PID를 컨테이너 cgroup 라벨로 변환하는 디코더"""

    def __init__(self, resolver: Optional[ContainerdResolver] = None):
        self.resolver = resolver or ContainerdResolver()

    def decode(self, data: bytes, conf: Optional[Dict[str, Any]] = None) -> bytes:
        """호스트 바이트 순서의 u64 PID를 라벨로 변환

        Raises:
            ValueError: 입력이 8바이트보다 짧은 경우
        """
        pid = decode_host_uint64(data)
        return self.resolver.resolve(pid)
