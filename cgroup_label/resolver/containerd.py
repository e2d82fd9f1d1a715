"""containerd PID 라벨 리졸버

커널 이벤트에서 추출한 PID를 컨테이너 cgroup 라벨로 변환합니다.

조회 정책:
1. 캐시 적중: 저장된 라벨을 즉시 반환 (I/O 없음)
2. 캐시 미스: 전체 cgroup 파일을 다시 스캔(재구성)한 뒤 재조회
3. 여전히 없으면: unknown_containerd_pid:<pid> 대체 라벨 반환

미스가 발생할 때마다 재구성하고, 적중 시에는 재구성하지 않습니다.
따라서 재사용된 PID는 다른 PID의 미스로 재구성이 일어나기 전까지
이전 프로세스의 라벨을 반환할 수 있습니다.
"""

import threading
from functools import partial
from typing import Callable, Iterable, Optional

from .cache import PidLabelCache
from .result import Diagnostic, DiagnosticKind, RebuildReport, ResolveResult
from ..cgroup.parser import CgroupParseError, CgroupRecordParser, SystemdCgroupParser, parse_cgroup_file
from ..cgroup.scanner import PidExtractError, list_descriptor_paths, to_descriptor
from ..config.settings import settings
from ..metrics import prometheus as metrics
from ..utils.logging import get_logger, reset_pid, set_pid

PathEnumerator = Callable[[], Iterable[str]]


def unknown_label(pid: int) -> bytes:
    """라벨을 찾지 못한 PID의 대체 라벨"""
    return settings.UNKNOWN_LABEL_FORMAT.format(pid=pid).encode()


class ContainerdResolver:
    """PID -> cgroup 라벨 리졸버

    캐시 조회와 재구성은 하나의 락으로 직렬화되어, 동시에 미스가 나더라도
    재구성은 한 번에 하나만 실행됩니다.
    """

    def __init__(
        self,
        proc_root: Optional[str] = None,
        parser: Optional[CgroupRecordParser] = None,
        enumerate_paths: Optional[PathEnumerator] = None,
    ):
        self.logger = get_logger(__name__)
        self.proc_root = proc_root or settings.proc_root
        self.parser = parser or SystemdCgroupParser()
        self.enumerate_paths = enumerate_paths or partial(list_descriptor_paths, self.proc_root)
        self.cache = PidLabelCache()
        self._lock = threading.Lock()
        self.logger.info(f"[ContainerdResolver] 초기화 완료 - proc_root: {self.proc_root}")

    def resolve(self, pid: int) -> bytes:
        """PID의 라벨 반환 (예외를 발생시키지 않음)"""
        return self.resolve_detailed(pid).label

    def resolve_detailed(self, pid: int) -> ResolveResult:
        """PID의 라벨을 조회하고 조회 과정의 진단 정보를 함께 반환

        Args:
            pid: 호스트 PID (부호 없는 정수)

        Returns:
            ResolveResult:
                - cache_hit: 재구성 없이 캐시에서 찾았는지 여부
                - resolved: False면 label은 대체 라벨
                - rebuild: 미스로 인해 실행된 재구성 결과
        """
        token = set_pid(pid)
        try:
            with self._lock:
                label = self.cache.find(pid)
                if label is not None:
                    metrics.CACHE_HITS.inc()
                    return ResolveResult(pid=pid, label=label, cache_hit=True, resolved=True)

                metrics.CACHE_MISSES.inc()
                self.logger.debug("[캐시] 미스 - cgroup 캐시 재구성 시작")
                report = None
                try:
                    report = self._rebuild_locked()
                except Exception as e:
                    self.logger.error(f"[캐시] cgroup 캐시 재구성 중 오류: {e}")

                label = self.cache.find(pid)
                if label is not None:
                    return ResolveResult(pid=pid, label=label, cache_hit=False, resolved=True, rebuild=report)

            metrics.UNRESOLVED.inc()
            self.logger.debug("[캐시] 재구성 후에도 라벨 없음 - 대체 라벨 반환")
            return ResolveResult(pid=pid, label=unknown_label(pid), cache_hit=False, resolved=False, rebuild=report)
        finally:
            reset_pid(token)

    def rebuild(self) -> RebuildReport:
        """전체 cgroup 파일을 스캔하여 캐시 재구성"""
        with self._lock:
            return self._rebuild_locked()

    def _rebuild_locked(self) -> RebuildReport:
        report = RebuildReport()
        metrics.REBUILDS.inc()

        try:
            paths = list(self.enumerate_paths())
        except Exception as e:
            metrics.REBUILD_FAILURES.inc()
            message = f"cgroup 파일 목록 조회 실패: {e}"
            self.logger.error(f"[캐시] {message}")
            report.failed = True
            report.diagnostics.append(Diagnostic(kind=DiagnosticKind.ENUMERATION_FAILED, message=message))
            return report

        for path in paths:
            report.scanned += 1
            diagnostic = self._refresh_entry(path)
            if diagnostic is None:
                report.updated += 1
                continue
            metrics.SKIPPED_ENTRIES.labels(reason=diagnostic.kind.name.lower()).inc()
            report.diagnostics.append(diagnostic)

        metrics.CACHE_ENTRIES.set(len(self.cache))
        self.logger.debug(
            f"[캐시] 재구성 완료: "
            f"scanned={report.scanned}, "
            f"updated={report.updated}, "
            f"skipped={report.skipped}"
        )
        return report

    def _refresh_entry(self, path: str) -> Optional[Diagnostic]:
        """cgroup 파일 하나를 읽어 캐시에 반영

        Returns:
            None (성공) 또는 건너뛴 사유
        """
        try:
            descriptor = to_descriptor(path)
        except PidExtractError as e:
            # /proc/self, /proc/thread-self
            self.logger.debug(f"[캐시] {e}")
            return Diagnostic(kind=DiagnosticKind.PID_UNPARSEABLE, message=str(e), path=path)

        try:
            label = parse_cgroup_file(descriptor.path, self.parser)
        except OSError as e:
            self.logger.warning(f"[캐시] [{path}] 읽기 실패: {e}")
            return Diagnostic(kind=DiagnosticKind.CGROUP_UNREADABLE, message=str(e), path=path)
        except CgroupParseError as e:
            self.logger.debug(f"[캐시] [{path}] {e}")
            return Diagnostic(kind=DiagnosticKind.CGROUP_UNMATCHED, message=str(e), path=path)
        except Exception as e:
            self.logger.error(f"[캐시] [{path}] 레코드 추출 중 오류: {e}")
            return Diagnostic(kind=DiagnosticKind.ENTRY_FAILED, message=str(e), path=path)

        self.cache.save(descriptor.pid, label)
        return None
