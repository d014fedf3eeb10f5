"""데이터 모델: 방향별 시각표, 노선, 시각표 세트

모든 모델은 frozen=True + slots=True로 불변성을 보장한다.
TimetableSet은 로드 이후 읽기 전용으로만 사용된다.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Literal, Mapping, Optional

from src.skills.time_codec import parse_clock

Direction = Literal["down", "up"]

DIRECTIONS: tuple[Direction, ...] = ("down", "up")


def _stop_time(value: Any) -> Optional[str]:
    """시각 항목 검증: None 또는 "H:MM" 문자열만 허용 (그 외 ValueError)"""
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValueError(f"시각은 문자열 또는 null이어야 합니다: {value!r}")
    parse_clock(value)
    return value


@dataclass(frozen=True, slots=True)
class Train:
    """열차 1편 - times[i]는 소속 시각표 stations[i]의 시각 (None = 통과/미운행)"""

    number: str
    train_type: str
    times: tuple[Optional[str], ...]

    def stop_time(self, row: int) -> Optional[str]:
        t = self.times[row]
        return t if t else None


@dataclass(frozen=True, slots=True)
class DirectionalTimetable:
    """노선 1개, 방향 1개의 시각표"""

    line: str
    direction: Direction
    stations: tuple[str, ...]
    trains: tuple[Train, ...]

    def __post_init__(self) -> None:
        width = len(self.stations)
        for train in self.trains:
            if len(train.times) != width:
                raise ValueError(
                    f"{self.line}/{self.direction}: 열차 {train.number}의 "
                    f"시각 수({len(train.times)})가 역 수({width})와 다릅니다"
                )

    @classmethod
    def from_dict(
        cls,
        line: str,
        direction: Direction,
        data: Mapping[str, Any],
    ) -> DirectionalTimetable:
        """원본 JSON 구조 → DirectionalTimetable. 구조 오류 시 ValueError."""
        if not isinstance(data, Mapping):
            raise ValueError(f"{line}/{direction}: 시각표는 객체여야 합니다")
        try:
            stations = tuple(str(s) for s in data["stations"])
            trains = tuple(
                Train(
                    number=str(item["trainNumber"]),
                    train_type=str(item.get("type", "")),
                    times=tuple(_stop_time(t) for t in item["times"]),
                )
                for item in data["trains"]
            )
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            raise ValueError(f"{line}/{direction}: 시각표 형식 오류 ({e!r})") from e
        return cls(line=line, direction=direction, stations=stations, trains=trains)


@dataclass(frozen=True, slots=True)
class LineTimetables:
    """노선 1개의 하행/상행 시각표 쌍"""

    down: DirectionalTimetable
    up: DirectionalTimetable

    def for_direction(self, direction: Direction) -> DirectionalTimetable:
        return self.down if direction == "down" else self.up


@dataclass(frozen=True, slots=True)
class TimetableSet:
    """노선 ID → 하행/상행 시각표 (읽기 전용)"""

    lines: Mapping[str, LineTimetables]

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", MappingProxyType(dict(self.lines)))

    def __contains__(self, line: object) -> bool:
        return line in self.lines

    def line(self, line: str) -> LineTimetables:
        return self.lines[line]

    @property
    def line_ids(self) -> tuple[str, ...]:
        return tuple(self.lines)

    @classmethod
    def from_raw(
        cls,
        raw: Mapping[str, Mapping[str, Mapping[str, Any]]],
    ) -> TimetableSet:
        """{line: {"down": json, "up": json}} → TimetableSet

        한쪽 방향이라도 없으면 ValueError.
        """
        lines: dict[str, LineTimetables] = {}
        for line, dirs in raw.items():
            missing = [d for d in DIRECTIONS if d not in dirs]
            if missing:
                raise ValueError(f"{line}: {', '.join(missing)} 시각표가 없습니다")
            lines[line] = LineTimetables(
                down=DirectionalTimetable.from_dict(line, "down", dirs["down"]),
                up=DirectionalTimetable.from_dict(line, "up", dirs["up"]),
            )
        return cls(lines=lines)
