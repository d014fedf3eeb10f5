"""데이터 모델: 구간(leg), 왕복 패턴, 검색 결과

검색마다 새로 계산되는 값 객체이며 저장되지 않는다.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


@dataclass(frozen=True, slots=True)
class TripLeg:
    """열차 1편의 두 역 사이 구간"""

    train_number: str
    train_type: str
    departure_clock: str
    arrival_clock: str
    departure_minutes: int
    arrival_minutes: int

    @property
    def duration_minutes(self) -> int:
        return self.arrival_minutes - self.departure_minutes


@dataclass(frozen=True, slots=True)
class RoundTripPattern:
    """왕복 1건: 가는 편 + 체류 + 돌아오는 편"""

    outbound: TripLeg
    return_leg: TripLeg
    dwell_minutes: int
    total_minutes: int
    destination: str
    distance: int


class EmptyReason(Enum):
    """빈 결과 사유 (오류가 아닌 정상 결과)"""

    SAME_STATION = auto()
    NO_OUTBOUND = auto()
    NO_RETURN = auto()
    NO_PATTERNS = auto()


@dataclass(frozen=True, slots=True)
class SearchResult:
    """왕복 검색 결과

    patterns가 비어 있으면 reason에 사유가 들어간다.
    """

    origin: str
    patterns: tuple[RoundTripPattern, ...] = ()
    reason: Optional[EmptyReason] = None
    min_stay: int = 0
    depart_after_minutes: Optional[int] = None
    return_limit_minutes: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.patterns and self.reason is None:
            object.__setattr__(self, "reason", EmptyReason.NO_PATTERNS)

    @property
    def is_empty(self) -> bool:
        return not self.patterns

    @property
    def count(self) -> int:
        return len(self.patterns)

    @property
    def destinations(self) -> tuple[str, ...]:
        """정렬 후 처음 등장한 순서대로 중복 없는 목적지 이름"""
        return tuple(dict.fromkeys(p.destination for p in self.patterns))
