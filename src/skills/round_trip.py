"""왕복 패턴 조합 스킬

가는 편(A→B)과 돌아오는 편(B→A) 검색 결과를 조합하여
체류 시간/귀착 제한 조건을 만족하는 왕복 패턴을 만든다.

두 가지 검색을 지원한다:
  - 목적지 고정: A, B, 최소 체류 시간 지정
  - 목적지 자유: A, 출발 하한, 귀착 상한 지정 → 먼 역 순으로 정렬
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from src.models.query import FixedQuery, OpenQuery
from src.models.timetable import TimetableSet
from src.models.trip import EmptyReason, RoundTripPattern, SearchResult, TripLeg
from src.skills.timetable_index import canonical_stations
from src.skills.trip_finder import find_trips

logger = logging.getLogger("roundtrip.skill.round_trip")

# 목적지 자유 검색의 최소 체류 시간(분)
MIN_STAY = 10


def _pair_legs(
    outbound: Iterable[TripLeg],
    returns: list[TripLeg],
    destination: str,
    distance: int,
    min_stay: int,
    return_limit: int | None = None,
) -> list[RoundTripPattern]:
    """가는 편 × 돌아오는 편 전체 조합 중 조건을 만족하는 것"""
    patterns: list[RoundTripPattern] = []
    for out in outbound:
        for ret in returns:
            dwell = ret.departure_minutes - out.arrival_minutes
            if dwell < min_stay:
                continue
            if return_limit is not None and ret.arrival_minutes > return_limit:
                continue
            total = ret.arrival_minutes - out.departure_minutes
            if total <= 0:
                continue
            patterns.append(RoundTripPattern(
                outbound=out,
                return_leg=ret,
                dwell_minutes=dwell,
                total_minutes=total,
                destination=destination,
                distance=distance,
            ))
    return patterns


class RoundTripSkill:
    """왕복 패턴 검색 스킬 (동기, 부작용 없음)"""

    __slots__ = ("_timetables", "_min_stay")

    def __init__(self, timetables: TimetableSet, min_stay: int = MIN_STAY) -> None:
        self._timetables = timetables
        self._min_stay = min_stay

    @property
    def timetables(self) -> TimetableSet:
        return self._timetables

    def fixed_destination(
        self,
        line: str,
        origin_pos: int,
        dest_pos: int,
        min_stay: int = 0,
    ) -> SearchResult:
        """목적지 고정 검색

        정렬: 가는 편 출발 시각 오름차순, 같으면 체류 시간 오름차순.
        """
        stations = canonical_stations(self._timetables, line)
        origin = stations[origin_pos]
        base = dict(origin=origin, min_stay=min_stay)

        if origin_pos == dest_pos:
            return SearchResult(reason=EmptyReason.SAME_STATION, **base)

        outbound = find_trips(self._timetables, line, origin_pos, dest_pos)
        returns = find_trips(self._timetables, line, dest_pos, origin_pos)
        if not outbound:
            return SearchResult(reason=EmptyReason.NO_OUTBOUND, **base)
        if not returns:
            return SearchResult(reason=EmptyReason.NO_RETURN, **base)

        patterns = _pair_legs(
            outbound,
            returns,
            destination=stations[dest_pos],
            distance=abs(dest_pos - origin_pos),
            min_stay=min_stay,
        )
        patterns.sort(key=lambda p: (p.outbound.departure_minutes, p.dwell_minutes))

        logger.debug(
            "%s %s→%s: 가는 편 %d, 돌아오는 편 %d, 패턴 %d",
            line, origin, stations[dest_pos],
            len(outbound), len(returns), len(patterns),
        )
        return SearchResult(patterns=tuple(patterns), **base)

    def open_destination(
        self,
        line: str,
        origin_pos: int,
        depart_after_minutes: int,
        return_limit_minutes: int,
        min_stay: Optional[int] = None,
    ) -> SearchResult:
        """목적지 자유 검색

        정렬: 거리 내림차순, 같으면 가는 편 출발 시각 오름차순.
        """
        if min_stay is None:
            min_stay = self._min_stay
        stations = canonical_stations(self._timetables, line)
        origin = stations[origin_pos]

        # 먼 역부터
        candidates = sorted(
            (
                (pos, abs(pos - origin_pos))
                for pos in range(len(stations))
                if pos != origin_pos
            ),
            key=lambda c: c[1],
            reverse=True,
        )

        patterns: list[RoundTripPattern] = []
        for dest_pos, distance in candidates:
            outbound = [
                leg for leg in find_trips(self._timetables, line, origin_pos, dest_pos)
                if leg.departure_minutes >= depart_after_minutes
            ]
            returns = find_trips(self._timetables, line, dest_pos, origin_pos)
            patterns.extend(_pair_legs(
                outbound,
                returns,
                destination=stations[dest_pos],
                distance=distance,
                min_stay=min_stay,
                return_limit=return_limit_minutes,
            ))

        patterns.sort(key=lambda p: (-p.distance, p.outbound.departure_minutes))

        logger.debug(
            "%s %s 발 자유 검색: 후보 %d역, 패턴 %d",
            line, origin, len(candidates), len(patterns),
        )
        return SearchResult(
            origin=origin,
            patterns=tuple(patterns),
            reason=None if patterns else EmptyReason.NO_PATTERNS,
            min_stay=min_stay,
            depart_after_minutes=depart_after_minutes,
            return_limit_minutes=return_limit_minutes,
        )

    def run_fixed(self, query: FixedQuery) -> SearchResult:
        return self.fixed_destination(
            query.line, query.origin_pos, query.dest_pos, query.min_stay,
        )

    def run_open(self, query: OpenQuery) -> SearchResult:
        return self.open_destination(
            query.line,
            query.origin_pos,
            query.depart_after_minutes,
            query.return_limit_minutes,
        )
