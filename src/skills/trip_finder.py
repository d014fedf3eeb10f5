"""열차 검색 스킬

두 역(canonical 위치) 사이를 운행하는 열차를 찾아 출발 시각 순으로 반환한다.
가는 편/돌아오는 편 모두 같은 함수를 인자 순서만 바꿔 사용한다.
"""

from __future__ import annotations

import logging

from src.models.timetable import Direction, TimetableSet
from src.models.trip import TripLeg
from src.skills.time_codec import parse_clock
from src.skills.timetable_index import canonical_stations, resolve_row_index

logger = logging.getLogger("roundtrip.skill.trip_finder")


def select_direction(origin_pos: int, dest_pos: int) -> Direction:
    """canonical 순서상 앞 → 뒤면 하행, 아니면 상행"""
    return "down" if origin_pos < dest_pos else "up"


def find_trips(
    timetables: TimetableSet,
    line: str,
    origin_pos: int,
    dest_pos: int,
) -> list[TripLeg]:
    """origin → dest 구간 열차 목록 (출발 시각 오름차순, 동시각은 시각표 순서 유지)

    역이 시각표에 없거나 시각표 행 순서가 역방향이면 빈 목록.
    """
    direction = select_direction(origin_pos, dest_pos)
    timetable = timetables.line(line).for_direction(direction)
    stations = canonical_stations(timetables, line)

    origin_name = stations[origin_pos]
    dest_name = stations[dest_pos]
    row_origin = resolve_row_index(timetable, origin_name)
    row_dest = resolve_row_index(timetable, dest_name)

    if row_origin is None or row_dest is None or row_origin >= row_dest:
        logger.debug(
            "%s/%s: %s→%s 행 매핑 없음 (%s, %s)",
            line, direction, origin_name, dest_name, row_origin, row_dest,
        )
        return []

    legs: list[TripLeg] = []
    for train in timetable.trains:
        dep = train.stop_time(row_origin)
        arr = train.stop_time(row_dest)
        if dep and arr:
            legs.append(TripLeg(
                train_number=train.number,
                train_type=train.train_type,
                departure_clock=dep,
                arrival_clock=arr,
                departure_minutes=parse_clock(dep),
                arrival_minutes=parse_clock(arr),
            ))

    legs.sort(key=lambda leg: leg.departure_minutes)
    return legs
