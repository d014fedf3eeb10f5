"""로깅 설정

콘솔 + 파일 로깅을 구성한다.
콘솔은 레벨별 컬러 출력, 파일은 UTF-8 (역 이름이 일본어이므로).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path


# ANSI 컬러 코드
_COLORS = {
    "DEBUG": "\033[36m",     # Cyan
    "INFO": "\033[32m",      # Green
    "WARNING": "\033[33m",   # Yellow
    "ERROR": "\033[31m",     # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}


class ColorFormatter(logging.Formatter):
    """컬러 로그 포매터 (원본 레코드는 수정하지 않음)"""

    def format(self, record: logging.LogRecord) -> str:
        color = _COLORS.get(record.levelname, "")
        reset = _COLORS["RESET"]
        original = record.levelname
        record.levelname = f"{color}{original:<8}{reset}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def setup_logging(
    level: str = "INFO",
    log_file: str | Path | None = None,
) -> None:
    """로깅 초기화

    Args:
        level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR)
        log_file: 로그 파일 경로 (None이면 콘솔만)
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # 기존 핸들러 제거
    root.handlers.clear()

    # 콘솔 핸들러 (검색 결과는 stdout이므로 로그는 stderr)
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(ColorFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    root.addHandler(console)

    # 파일 핸들러 (선택)
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        root.addHandler(fh)

    # aiohttp 내부 로그 레벨 조정
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
