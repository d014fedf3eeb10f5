"""결과 표시 스킬 (프레젠테이션 어댑터)

검색 결과(SearchResult)를 화면용 텍스트로 만든다.
검색 엔진은 표시 문자열을 만들지 않으며, 문구/지역화는 모두 여기서 처리한다.
"""

from __future__ import annotations

from typing import Optional

from src.models.trip import EmptyReason, RoundTripPattern, SearchResult
from src.skills.parser import NOW
from src.skills.time_codec import format_clock, format_duration

NOW_LABEL = "現在時刻"

# 빈 결과 사유 → 안내 문구
EMPTY_MESSAGES: dict[EmptyReason, str] = {
    EmptyReason.SAME_STATION: "出発駅と目的駅が同じです。別の駅を選んでください。",
    EmptyReason.NO_OUTBOUND: "行きの列車が見つかりません。",
    EmptyReason.NO_RETURN: "帰りの列車が見つかりません。",
    EmptyReason.NO_PATTERNS: (
        "条件に合う往復パターンが見つかりません。"
        "帰着リミットを遅くしてみてください。"
    ),
}


def _half_hours(first_hour: int = 6, last_hour: int = 20) -> list[str]:
    return [f"{h}:{m}" for h in range(first_hour, last_hour + 1) for m in ("00", "30")]


def depart_after_options() -> list[tuple[str, str]]:
    """출발 하한 선택지 (label, value). 기본값은 "now"."""
    return [(NOW_LABEL, NOW)] + [(t, t) for t in _half_hours()]


def return_limit_options() -> list[tuple[str, str]]:
    """귀착 상한 선택지 (label, value). 기본값은 "17:00"."""
    return [(t, t) for t in _half_hours()] + [("21:00", "21:00")]


def station_options(stations: tuple[str, ...]) -> list[tuple[str, int]]:
    """역 선택지 (역 이름, canonical 위치)"""
    return [(name, i) for i, name in enumerate(stations)]


class TextRenderer:
    """검색 결과 → 텍스트"""

    __slots__ = ("_width",)

    def __init__(self, width: int = 40) -> None:
        self._width = width

    def render(self, result: SearchResult) -> str:
        if result.is_empty:
            return self.empty_message(result.reason)

        lines = [self.summary(result)]
        for i, pattern in enumerate(result.patterns, start=1):
            lines.append("─" * self._width)
            lines.extend(self.card(i, result.origin, pattern))
        return "\n".join(lines)

    @staticmethod
    def empty_message(reason: Optional[EmptyReason]) -> str:
        return EMPTY_MESSAGES[reason or EmptyReason.NO_PATTERNS]

    @staticmethod
    def summary(result: SearchResult) -> str:
        """요약 줄: 출발역, 시간 조건, 건수, (자유 검색이면) 목적지 목록"""
        if result.depart_after_minutes is None or result.return_limit_minutes is None:
            return f"{result.origin}発 滞在{result.min_stay}分以上：{result.count}件"
        dep = format_clock(result.depart_after_minutes)
        limit = format_clock(result.return_limit_minutes)
        return (
            f"{result.origin}発 {dep}〜{limit}：{result.count}件\n"
            f"行き先: {'、'.join(result.destinations)}"
        )

    @staticmethod
    def card(number: int, origin: str, p: RoundTripPattern) -> list[str]:
        out, ret = p.outbound, p.return_leg
        return [
            f"パターン {number}　─　{p.destination}まで",
            f"  {out.departure_clock}  {origin} 発  {out.train_type} {out.train_number}",
            "    ↓",
            f"  {out.arrival_clock}  {p.destination} 着",
            f"  {p.destination}で {format_duration(p.dwell_minutes)} 滞在",
            f"  {ret.departure_clock}  {p.destination} 発  {ret.train_type} {ret.train_number}",
            "    ↓",
            f"  {ret.arrival_clock}  {origin} 着",
            f"  往復合計: {format_duration(p.total_minutes)}",
        ]
