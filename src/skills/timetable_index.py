"""시각표 인덱스 스킬

역 선택은 항상 노선의 하행 시각표 역 순서(canonical order) 위치로 한다.
상행 시각표는 역 순서나 구성이 다를 수 있으므로 역 이름으로 행을 다시 찾는다.
"""

from __future__ import annotations

from typing import Optional

from src.models.timetable import DirectionalTimetable, TimetableSet


def resolve_row_index(
    timetable: DirectionalTimetable,
    station_name: str,
) -> Optional[int]:
    """시각표 내 역 행 번호. 없으면 None."""
    try:
        return timetable.stations.index(station_name)
    except ValueError:
        return None


def canonical_stations(timetables: TimetableSet, line: str) -> tuple[str, ...]:
    """노선의 하행 기준 역 목록 (미지원 노선이면 KeyError)"""
    return timetables.line(line).down.stations


def station_position(
    timetables: TimetableSet,
    line: str,
    station_name: str,
) -> Optional[int]:
    """역 이름 → canonical 위치. 없으면 None."""
    name = station_name.strip()
    stations = canonical_stations(timetables, line)
    return stations.index(name) if name in stations else None
