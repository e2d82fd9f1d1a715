import logging
import sys
import contextvars
from typing import Optional

from ..config.settings import settings

# Context variables
current_pid = contextvars.ContextVar('pid', default=None)

class ProcessContextFilter(logging.Filter):
    """조회 중인 PID 정보를 로그 레코드에 추가하는 필터"""

    def filter(self, record):
        pid = current_pid.get()
        record.pid = pid if pid is not None else "---"
        return True

def get_logger(name: str) -> logging.Logger:
    """컨텍스트 정보가 포함된 로거를 반환합니다."""
    logger = logging.getLogger(name)
    if not any(isinstance(f, ProcessContextFilter) for f in logger.filters):
        logger.addFilter(ProcessContextFilter())
    return logger

def set_pid(pid: Optional[int]) -> contextvars.Token:
    """현재 컨텍스트의 PID를 설정합니다.

    Returns:
        이전 값으로 되돌릴 때 reset_pid에 전달할 토큰
    """
    return current_pid.set(pid)

def reset_pid(token: contextvars.Token) -> None:
    """set_pid 이전의 PID로 되돌립니다."""
    current_pid.reset(token)

def setup_logging(level: Optional[int] = None):
    """기본 로깅 설정

    Args:
        level: 로깅 레벨 (기본값: settings.log_level)
    """
    if level is None:
        level = getattr(logging, settings.log_level, logging.INFO)

    # 루트 로거 설정
    root = logging.getLogger()
    root.setLevel(level)

    # 기존 핸들러 제거
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(ProcessContextFilter())
    handler.setFormatter(
        logging.Formatter('%(asctime)s - %(levelname)s - %(pid)s - %(name)s - %(message)s')
    )
    root.addHandler(handler)

    logger = get_logger(__name__)
    logger.debug(f"[설정] 로깅 설정 완료 (레벨: {logging.getLevelName(level)})")
