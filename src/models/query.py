"""데이터 모델: 왕복 검색 요청

역은 노선의 하행 기준 역 목록(canonical order) 위치로 지정한다.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FixedQuery:
    """목적지 고정 검색 요청"""

    line: str
    origin_pos: int
    dest_pos: int
    min_stay: int = 0

    def summary(self) -> str:
        return (
            f"{self.line} #{self.origin_pos}→#{self.dest_pos} "
            f"체류 {self.min_stay}분 이상"
        )


@dataclass(frozen=True, slots=True)
class OpenQuery:
    """목적지 자유 검색 요청 (거리순)"""

    line: str
    origin_pos: int
    depart_after_minutes: int
    return_limit_minutes: int

    def __post_init__(self) -> None:
        if self.depart_after_minutes < 0 or self.return_limit_minutes < 0:
            raise ValueError("시각은 0 이상이어야 합니다")

    def summary(self) -> str:
        return (
            f"{self.line} #{self.origin_pos} "
            f"{self.depart_after_minutes}분 이후 출발, "
            f"{self.return_limit_minutes}분까지 귀착"
        )
