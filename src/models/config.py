"""애플리케이션 설정 모델"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from src.skills.line_data import DATA_FILES

# 저장소 루트의 data/ 디렉터리
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2] / "data"


@dataclass
class AppConfig:
    """애플리케이션 설정 - 데이터 소스/HTTP/검색 기본값"""

    # 데이터 소스
    data_dir: Path = DEFAULT_DATA_DIR
    data_files: dict[str, dict[str, str]] = field(
        default_factory=lambda: {
            line: dict(dirs) for line, dirs in DATA_FILES.items()
        }
    )

    # 검색 기본값
    min_stay: int = 10
    default_depart_after: str = "now"
    default_return_limit: str = "17:00"

    # HTTP 설정 (http(s) 소스일 때만 사용)
    request_timeout: float = 15.0
    connect_timeout: float = 5.0
    max_connections: int = 4

    def sources(self) -> dict[str, dict[str, str]]:
        """{line: {direction: URL 또는 로컬 경로}}

        http(s) URL은 그대로, 상대 경로는 data_dir 기준으로 해석한다.
        """
        resolved: dict[str, dict[str, str]] = {}
        for line, dirs in self.data_files.items():
            resolved[line] = {}
            for direction, src in dirs.items():
                if src.startswith(("http://", "https://")):
                    resolved[line][direction] = src
                else:
                    resolved[line][direction] = str(Path(self.data_dir) / src)
        return resolved
