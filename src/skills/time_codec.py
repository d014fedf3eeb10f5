"""시각 변환 스킬

"HH:MM" 문자열 ↔ 자정 기준 분(int) 변환과 소요시간 표시 문자열을 제공한다.
"""

from __future__ import annotations

from datetime import datetime


def parse_clock(text: str) -> int:
    """"H:MM" / "HH:MM" → 자정 기준 분

    범위 검증 없음. 형식이 틀리면 int() 변환에서 ValueError.
    """
    hour, minute = text.split(":")
    return int(hour) * 60 + int(minute)


def format_clock(minutes: int) -> str:
    """분 → "HH:MM" (24시 이후도 그대로 표시)"""
    hour, minute = divmod(minutes, 60)
    return f"{hour:02d}:{minute:02d}"


def format_duration(minutes: int) -> str:
    """분 → "M分" 또는 "H時間M分" """
    hour, minute = divmod(minutes, 60)
    if hour == 0:
        return f"{minute}分"
    return f"{hour}時間{minute}分"


def minutes_of_day(moment: datetime) -> int:
    return moment.hour * 60 + moment.minute
