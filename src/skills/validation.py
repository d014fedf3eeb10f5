"""입력 검증 스킬

로드된 시각표를 기준으로 입력값을 검증하고 FixedQuery / OpenQuery를 생성한다.
출발역 = 도착역은 검증 오류가 아니다 (검색 결과의 SAME_STATION으로 처리).
"""

from __future__ import annotations

from typing import Any

from src.models.query import FixedQuery, OpenQuery
from src.models.timetable import TimetableSet
from src.skills.line_data import validate_line
from src.skills.timetable_index import canonical_stations, station_position


class ValidationSkill:
    """입력 검증 스킬"""

    def __init__(self, timetables: TimetableSet) -> None:
        self._timetables = timetables

    def validate_fixed(self, data: dict[str, Any]) -> FixedQuery:
        """목적지 고정 검색 검증. 실패 시 ValueError."""
        line = self.validate_line(data.get("line"))
        origin = self.resolve_station(line, data.get("origin"), "출발역")
        dest = self.resolve_station(line, data.get("destination"), "목적지")
        return FixedQuery(
            line=line,
            origin_pos=origin,
            dest_pos=dest,
            min_stay=data.get("min_stay", 0),
        )

    def validate_open(self, data: dict[str, Any]) -> OpenQuery:
        """목적지 자유 검색 검증. 실패 시 ValueError."""
        line = self.validate_line(data.get("line"))
        origin = self.resolve_station(line, data.get("origin"), "출발역")
        return OpenQuery(
            line=line,
            origin_pos=origin,
            depart_after_minutes=data["depart_after_minutes"],
            return_limit_minutes=data["return_limit_minutes"],
        )

    def validate_line(self, name: object) -> str:
        if not name:
            raise ValueError("노선이 입력되지 않았습니다")
        line = validate_line(str(name))
        if line not in self._timetables:
            raise ValueError(f"'{line}' 노선의 시각표가 로드되지 않았습니다")
        return line

    def resolve_station(self, line: str, value: object, label: str) -> int:
        """역 이름 또는 역 위치(int/숫자 문자열) → canonical 위치

        역 이름이 우선이며, 이름으로 찾지 못한 숫자 문자열만 위치로 해석한다.
        """
        if value is None or isinstance(value, bool):
            raise ValueError(f"{label}이 입력되지 않았습니다")
        if isinstance(value, str) and not value.strip():
            raise ValueError(f"{label}이 입력되지 않았습니다")

        stations = canonical_stations(self._timetables, line)
        if isinstance(value, int):
            pos: int | None = value
        else:
            text = str(value).strip()
            pos = station_position(self._timetables, line, text)
            if pos is None:
                if not text.isdigit():
                    raise ValueError(
                        f"'{value}'은(는) 이 노선에 없는 역입니다. "
                        f"역 목록: {', '.join(stations)}"
                    )
                pos = int(text)

        if not 0 <= pos < len(stations):
            raise ValueError(
                f"{label} 위치 {pos}가 범위(0~{len(stations) - 1})를 벗어났습니다"
            )
        return pos
