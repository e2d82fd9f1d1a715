"""프로메테우스 메트릭

PID 라벨 리졸버의 캐시 동작을 메트릭으로 노출합니다.
"""

import threading
from typing import Optional
from prometheus_client import Counter, Gauge, start_http_server
from ..utils.logging import get_logger
from ..config.settings import settings

CACHE_HITS = Counter(
    "cgroup_label_cache_hits",
    "PID label lookups answered from the cache",
)
CACHE_MISSES = Counter(
    "cgroup_label_cache_misses",
    "PID label lookups that triggered a cache rebuild",
)
REBUILDS = Counter(
    "cgroup_label_rebuilds",
    "Full cgroup descriptor scans",
)
REBUILD_FAILURES = Counter(
    "cgroup_label_rebuild_failures",
    "Scans that could not enumerate cgroup descriptors",
)
SKIPPED_ENTRIES = Counter(
    "cgroup_label_skipped_entries",
    "cgroup descriptors skipped during a scan",
    ["reason"],
)
UNRESOLVED = Counter(
    "cgroup_label_unresolved",
    "Lookups answered with the unknown fallback label",
)
CACHE_ENTRIES = Gauge(
    "cgroup_label_cache_entries",
    "Number of PIDs currently held in the label cache",
)

class PrometheusMetrics:
    """프로메테우스 메트릭 서버 클래스"""

    def __init__(self, port: Optional[int] = None):
        self.logger = get_logger(__name__)
        self.port = port if port is not None else settings.prometheus_port

    def _run_metrics_server(self):
        """메트릭 서버 실행"""
        try:
            self.logger.info(f"[프로메테우스] 메트릭 서버 시작 (포트: {self.port})")
            start_http_server(self.port)
        except Exception as e:
            self.logger.error(f"[프로메테우스] 메트릭 서버 시작 실패: {e}")
            raise

    def start_metrics_server(self) -> threading.Thread:
        """메트릭 서버를 데몬 쓰레드로 시작"""
        metrics_thread = threading.Thread(
            target=self._run_metrics_server,
            daemon=True,
            name="prometheus-metrics-server"
        )
        metrics_thread.start()
        return metrics_thread
