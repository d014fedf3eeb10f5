"""pytest 공통 픽스처

모든 테스트에서 공유하는 합성 시각표와 설정을 제공한다.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from src.models.config import AppConfig
from src.models.timetable import TimetableSet


@pytest.fixture
def main_raw() -> dict[str, Any]:
    """main 노선: A-B-C-D-E, 상행은 역순. D1은 D역 통과, U3도 D역 통과."""
    return {
        "down": {
            "stations": ["A", "B", "C", "D", "E"],
            "trains": [
                {"trainNumber": "D1", "type": "普通",
                 "times": ["09:00", "09:20", "09:40", None, "10:00"]},
                {"trainNumber": "D2", "type": "普通",
                 "times": ["09:30", "09:50", "10:10", "10:20", "10:30"]},
                {"trainNumber": "D3", "type": "急行",
                 "times": ["12:00", "12:20", "12:40", "12:50", "13:00"]},
            ],
        },
        "up": {
            "stations": ["E", "D", "C", "B", "A"],
            "trains": [
                {"trainNumber": "U1", "type": "普通",
                 "times": ["10:05", "10:15", "10:25", "10:45", "11:00"]},
                {"trainNumber": "U2", "type": "普通",
                 "times": ["11:00", "11:10", "11:20", "11:40", "12:00"]},
                {"trainNumber": "U3", "type": "急行",
                 "times": ["15:00", None, "15:20", "15:40", "16:00"]},
            ],
        },
    }


@pytest.fixture
def ikawa_raw() -> dict[str, Any]:
    """ikawa 노선: P-Q-R, 상행 시각표에는 Q역이 없다."""
    return {
        "down": {
            "stations": ["P", "Q", "R"],
            "trains": [
                {"trainNumber": "K1", "type": "普通",
                 "times": ["08:00", None, "08:30"]},
                {"trainNumber": "K3", "type": "普通",
                 "times": ["10:00", "10:10", "10:20"]},
            ],
        },
        "up": {
            "stations": ["R", "P"],
            "trains": [
                {"trainNumber": "K2", "type": "普通",
                 "times": ["09:00", "09:30"]},
            ],
        },
    }


@pytest.fixture
def sample_timetables(
    main_raw: dict[str, Any],
    ikawa_raw: dict[str, Any],
) -> TimetableSet:
    return TimetableSet.from_raw({"main": main_raw, "ikawa": ikawa_raw})


@pytest.fixture
def timetable_dir(
    tmp_path: Path,
    main_raw: dict[str, Any],
    ikawa_raw: dict[str, Any],
) -> Path:
    """main/ikawa 시각표 JSON 4개를 기본 파일명으로 기록한 디렉터리"""
    for line, raw in (("main", main_raw), ("ikawa", ikawa_raw)):
        for direction in ("down", "up"):
            path = tmp_path / f"{line}-line-{direction}.json"
            path.write_text(
                json.dumps(raw[direction], ensure_ascii=False),
                encoding="utf-8",
            )
    return tmp_path


@pytest.fixture
def sample_config(timetable_dir: Path) -> AppConfig:
    """테스트용 설정 (임시 디렉터리의 시각표 사용)"""
    return AppConfig(
        data_dir=timetable_dir,
        request_timeout=1.0,
        connect_timeout=1.0,
    )
