import os


class Settings:
    """애플리케이션 설정

    모든 환경 변수와 상수 기반 설정을 중앙 집중적으로 관리합니다.
    """

    # cgroup 레코드 접두사
    # cgroup/parser.py에서 systemd 통합 cgroup 레코드 판별에 사용
    CGROUP_PREFIX: str = "1:name=systemd:"

    # 라벨을 찾지 못한 PID에 붙이는 대체 라벨 형식
    UNKNOWN_LABEL_FORMAT: str = "unknown_containerd_pid:{pid}"

    def __init__(self):
        # procfs 설정
        self.proc_root = os.getenv("PROC_ROOT", "/proc")

        # 로깅 설정
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        # 프로메테우스 설정
        self.prometheus_port = int(os.getenv("PROMETHEUS_PORT", "9435"))


# 싱글톤 인스턴스 생성
settings = Settings()
