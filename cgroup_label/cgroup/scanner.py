import os
import re
from dataclasses import dataclass
from typing import List

PID_SEGMENT = re.compile(r"[0-9]+")
CGROUP_FILE = "cgroup"


class PidExtractError(ValueError):
    """경로의 PID 위치가 숫자가 아닌 경우 (예: /proc/self/cgroup)"""


@dataclass(frozen=True)
class CgroupDescriptor:
    """스캔 중에만 사용되는 (PID, cgroup 파일 경로) 쌍"""
    pid: int
    path: str


def list_descriptor_paths(proc_root: str) -> List[str]:
    """proc 루트 아래의 모든 <entry>/cgroup 경로 나열

    숫자가 아닌 항목(self, thread-self 등)도 그대로 포함됩니다.
    PID 판별은 extract_pid의 책임입니다.

    Raises:
        OSError: proc 루트 자체를 나열할 수 없는 경우
    """
    paths = []
    for entry in sorted(os.listdir(proc_root)):
        path = os.path.join(proc_root, entry, CGROUP_FILE)
        if os.path.isfile(path):
            paths.append(path)
    return paths


def extract_pid(path: str) -> int:
    """cgroup 파일 경로의 PID 세그먼트를 부호 없는 정수로 변환

    Args:
        path: cgroup 파일 경로
            예: "/proc/1234/cgroup" -> 1234

    Raises:
        PidExtractError: 세그먼트가 숫자로만 이루어지지 않은 경우
    """
    segment = os.path.basename(os.path.dirname(path))
    if not PID_SEGMENT.fullmatch(segment):
        raise PidExtractError(f"cannot extract pid from: {path}")
    return int(segment)


def to_descriptor(path: str) -> CgroupDescriptor:
    return CgroupDescriptor(pid=extract_pid(path), path=path)
