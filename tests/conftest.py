import pytest
from pathlib import Path

class FakeProc:
    """테스트용 가짜 /proc 트리"""
    def __init__(self, root: Path):
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)

    def add(self, entry, content: str) -> Path:
        """<root>/<entry>/cgroup 파일 생성 (이미 있으면 덮어쓰기)"""
        entry_dir = self.root / str(entry)
        entry_dir.mkdir(exist_ok=True)
        path = entry_dir / "cgroup"
        path.write_text(content)
        return path

    def remove(self, entry) -> None:
        (self.root / str(entry) / "cgroup").unlink()

@pytest.fixture
def fake_proc(tmp_path):
    """빈 가짜 proc 루트 fixture"""
    return FakeProc(tmp_path / "proc")
