from typing import Dict, Optional
import logging

class PidLabelCache:
    """PID와 cgroup 라벨 매핑을 저장하는 저장소

    항목은 재구성(rebuild) 시에만 덮어쓰며 개별 삭제는 하지 않습니다.
    종료된 프로세스의 항목이 남아 있을 수 있습니다.
    """
    def __init__(self):
        # PID -> 라벨
        self.labels: Dict[int, bytes] = {}
        self.logger = logging.getLogger(__name__)

    def save(self, pid: int, label: bytes) -> None:
        """PID의 라벨 저장 (기존 라벨이 있으면 덮어쓰기)

        Raises:
            ValueError: PID가 음수인 경우
        """
        if pid < 0:
            raise ValueError("pid must be non-negative")
        self.labels[pid] = label

    def find(self, pid: int) -> Optional[bytes]:
        """PID로 라벨 조회

        Returns:
            라벨 또는 None (캐시에 없는 경우)
        """
        return self.labels.get(pid)

    def snapshot(self) -> Dict[int, bytes]:
        """현재 매핑의 복사본 반환"""
        return dict(self.labels)

    def __contains__(self, pid: int) -> bool:
        return pid in self.labels

    def __len__(self) -> int:
        return len(self.labels)

    def print_current_state(self) -> None:
        """현재 캐시 상태 출력"""
        self.logger.info(f"[상태] 현재 PID 라벨 캐시 상태 ({len(self.labels)}개)")
        if not self.labels:
            self.logger.info("(비어있음)")
            return

        for pid in sorted(self.labels):
            label = self.labels[pid].decode('utf-8', errors='replace')
            self.logger.info(f"[상태]   PID {pid}: {label}")
