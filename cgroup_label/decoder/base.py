from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

class Decoder(ABC):
    """라벨 디코더 기본 클래스

    디코더 레지스트리가 이벤트마다 호출하는 인터페이스입니다.
    커널 이벤트의 원시 바이트를 메트릭 라벨 바이트로 변환합니다.
    """

    @abstractmethod
    def decode(self, data: bytes, conf: Optional[Dict[str, Any]] = None) -> bytes:
        """원시 바이트를 라벨로 변환

        Args:
            data: BPF 맵 키에서 잘라낸 원시 바이트
            conf: 레지스트리가 전달하는 디코더 설정 (없을 수 있음)

        Returns:
            메트릭에 붙일 라벨 바이트열
        """
        pass
