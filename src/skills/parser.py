"""입력 파싱 스킬

CLI 인자와 화면 입력값(문자열)을 구조화된 딕셔너리로 변환한다.
"현재 시각"은 호출 측이 now로 넘겨준다.
역 지정(위치 또는 역 이름)의 해석은 ValidationSkill이 담당한다.
"""

from __future__ import annotations

import argparse
from datetime import datetime
from typing import Any

from src.skills.time_codec import minutes_of_day, parse_clock

NOW = "now"
DEFAULT_RETURN_LIMIT = "17:00"


class ParserSkill:
    """입력 파싱 스킬"""

    __slots__ = ("_default_depart_after", "_default_return_limit")

    def __init__(
        self,
        default_depart_after: str = NOW,
        default_return_limit: str = DEFAULT_RETURN_LIMIT,
    ) -> None:
        self._default_depart_after = default_depart_after
        self._default_return_limit = default_return_limit

    @staticmethod
    def parse_min_stay(value: object) -> int:
        """최소 체류 시간(분). 해석할 수 없거나 음수면 0."""
        try:
            return max(0, int(str(value).strip()))
        except (TypeError, ValueError):
            return 0

    @staticmethod
    def resolve_depart_after(value: str, now: datetime) -> int:
        """"now" 또는 "H:MM" → 분"""
        value = value.strip()
        if value == NOW:
            return minutes_of_day(now)
        return parse_clock(value)

    def parse_fixed(self, raw_inputs: dict[str, Any]) -> dict[str, Any]:
        """목적지 고정 검색 입력 → 구조화 dict"""
        return {
            "line": str(raw_inputs.get("line") or "").strip(),
            "origin": raw_inputs.get("origin"),
            "destination": raw_inputs.get("destination"),
            "min_stay": self.parse_min_stay(raw_inputs.get("min_stay")),
        }

    def parse_open(
        self,
        raw_inputs: dict[str, Any],
        now: datetime,
    ) -> dict[str, Any]:
        """목적지 자유 검색 입력 → 구조화 dict"""
        depart_after = str(raw_inputs.get("depart_after") or self._default_depart_after)
        return_limit = str(raw_inputs.get("return_limit") or self._default_return_limit)
        return {
            "line": str(raw_inputs.get("line") or "").strip(),
            "origin": raw_inputs.get("origin"),
            "depart_after_minutes": self.resolve_depart_after(depart_after, now),
            "return_limit_minutes": parse_clock(return_limit.strip()),
        }

    @staticmethod
    def parse_cli(args: argparse.Namespace) -> dict[str, Any]:
        """CLI 인자 → dict 변환"""
        return {
            "line": args.line.strip(),
            "origin": args.origin.strip() if args.origin else None,
            "destination": args.destination.strip() if args.destination else None,
            "min_stay": args.min_stay,
            "depart_after": args.depart_after,
            "return_limit": args.return_limit,
        }
