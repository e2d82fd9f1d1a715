"""cgroup 레코드 파서

/proc/<pid>/cgroup 파일에서 컨테이너를 식별하는 라벨을 추출합니다.
레코드 형식별 추출 로직은 CgroupRecordParser 구현체로 분리되어 있어
캐시 정책과 무관하게 교체할 수 있습니다.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..config.settings import settings


class CgroupParseError(ValueError):
    """cgroup 파일에서 일치하는 레코드를 찾지 못한 경우"""


class CgroupRecordParser(ABC):
    """cgroup 레코드 추출기 인터페이스"""
    @abstractmethod
    def extract(self, line: bytes) -> Optional[bytes]:
        """한 줄의 cgroup 레코드에서 라벨을 추출

        Args:
            line: 개행 문자가 제거된 레코드 한 줄
                예: b"1:name=systemd:/docker/abc123"
                예: b"0::/user.slice"

        Returns:
            라벨 바이트열 또는 None (인식하지 못하는 레코드)
        """
        pass


class SystemdCgroupParser(CgroupRecordParser):
    """systemd 통합 cgroup 레코드(1:name=systemd:<label>) 추출기"""

    def __init__(self, prefix: Optional[str] = None):
        self.prefix = (prefix or settings.CGROUP_PREFIX).encode()

    def extract(self, line: bytes) -> Optional[bytes]:
        if line.startswith(self.prefix):
            return line[len(self.prefix):]
        return None


def parse_cgroup_file(path: str, parser: CgroupRecordParser) -> bytes:
    """cgroup 파일을 한 줄씩 읽어 처음 일치하는 레코드의 라벨을 반환

    Raises:
        OSError: 파일을 열거나 읽을 수 없는 경우 (프로세스 종료 등)
        CgroupParseError: 일치하는 레코드가 없는 경우
    """
    with open(path, "rb") as f:
        for raw_line in f:
            label = parser.extract(raw_line.rstrip(b"\r\n"))
            if label is not None:
                return label
    raise CgroupParseError("could not extract cgroup")
