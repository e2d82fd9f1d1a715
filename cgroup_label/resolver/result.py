from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

class DiagnosticKind(Enum):
    """재구성 중 발생한 문제 유형"""
    ENUMERATION_FAILED = auto()   # cgroup 파일 목록 자체를 얻지 못함
    PID_UNPARSEABLE = auto()      # 경로의 PID 세그먼트가 숫자가 아님
    CGROUP_UNREADABLE = auto()    # 파일 열기/읽기 실패
    CGROUP_UNMATCHED = auto()     # 일치하는 레코드 없음
    ENTRY_FAILED = auto()         # 레코드 추출기의 예상치 못한 오류

@dataclass(frozen=True)
class Diagnostic:
    """진단 이벤트"""
    kind: DiagnosticKind
    message: str
    path: Optional[str] = None

@dataclass
class RebuildReport:
    """캐시 재구성 결과

    failed는 목록 조회 자체가 실패했을 때만 True입니다.
    개별 항목의 실패는 diagnostics에만 기록됩니다.
    """
    scanned: int = 0
    updated: int = 0
    failed: bool = False
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        return sum(1 for d in self.diagnostics if d.kind != DiagnosticKind.ENUMERATION_FAILED)

@dataclass(frozen=True)
class ResolveResult:
    """PID 라벨 조회 결과"""
    pid: int
    label: bytes
    cache_hit: bool
    resolved: bool                          # False면 label은 대체 라벨
    rebuild: Optional[RebuildReport] = None

    @property
    def diagnostics(self) -> List[Diagnostic]:
        if self.rebuild is None:
            return []
        return self.rebuild.diagnostics
