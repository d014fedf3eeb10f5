"""왕복 여행 패턴 검색 - CLI 진입점

사용 예시:
    python -m src.main --line main -a 金谷 --depart-after 9:00 --return-limit 17:00

    python -m src.main --line ikawa -a 千頭 -b 井川 --min-stay 30

    python -m src.main --line main --list-stations

    python -m src.main --line main (대화형 모드)
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from src.models.config import AppConfig
from src.models.timetable import TimetableSet
from src.models.trip import SearchResult
from src.skills.line_data import DATA_FILES, line_label, validate_line
from src.skills.loader import TimetableLoadError, load_timetables
from src.skills.parser import ParserSkill
from src.skills.renderer import TextRenderer, station_options
from src.skills.round_trip import RoundTripSkill
from src.skills.timetable_index import canonical_stations
from src.skills.validation import ValidationSkill
from src.utils.logging_config import setup_logging

logger = logging.getLogger("roundtrip.main")


def build_parser(config: Optional[AppConfig] = None) -> argparse.ArgumentParser:
    config = config or AppConfig()
    p = argparse.ArgumentParser(
        description="日帰り往復パターン検索",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "예시:\n"
            "  python -m src.main --line main -a 金谷 --return-limit 17:00\n"
            "  python -m src.main --line ikawa -a 千頭 -b 井川 --min-stay 30\n"
            "  python -m src.main --line main  (대화형 모드)"
        ),
    )
    p.add_argument(
        "--line",
        default="main",
        help=f"노선 ({', '.join(DATA_FILES)}, 기본: main)",
    )
    p.add_argument("-a", "--origin", help="출발역 (역 이름 또는 위치)")
    p.add_argument(
        "-b", "--destination",
        help="목적지 (지정하면 목적지 고정 검색, 생략하면 거리순 자유 검색)",
    )
    p.add_argument(
        "--min-stay",
        default="0",
        help="최소 체류 시간 분 (목적지 고정 검색, 기본: 0)",
    )
    p.add_argument(
        "--depart-after",
        default=config.default_depart_after,
        help=f"출발 하한 H:MM 또는 now (자유 검색, 기본: {config.default_depart_after})",
    )
    p.add_argument(
        "--return-limit",
        default=config.default_return_limit,
        help=f"귀착 상한 H:MM (자유 검색, 기본: {config.default_return_limit})",
    )
    p.add_argument(
        "--list-stations",
        action="store_true",
        help="노선의 역 목록 출력 후 종료",
    )
    p.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="시각표 JSON 디렉터리 (기본: data/)",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    p.add_argument("--log-file", default=None, help="로그 파일 경로")
    return p


def interactive_input(timetables: TimetableSet, line: str) -> dict[str, Any]:
    """대화형 입력 → 원시 입력 dict"""
    print(f"\n  {line_label(line)} - 아래 정보를 입력하세요\n")
    for name, pos in station_options(canonical_stations(timetables, line)):
        print(f"  [{pos:2d}] {name}")
    print()

    origin = input("  출발역 (이름 또는 번호): ").strip()
    destination = input("  목적지 (비우면 거리순 자유 검색): ").strip()
    raw: dict[str, Any] = {"line": line, "origin": origin}
    if destination:
        raw["destination"] = destination
        raw["min_stay"] = input("  최소 체류 시간(분, 기본 0): ").strip()
    else:
        raw["depart_after"] = input("  출발 하한 (H:MM, 기본 now): ").strip()
        raw["return_limit"] = input("  귀착 상한 (H:MM, 기본 17:00): ").strip()
    return raw


def search(
    timetables: TimetableSet,
    raw: dict[str, Any],
    now: datetime,
    config: Optional[AppConfig] = None,
) -> SearchResult:
    """원시 입력 → 파싱 → 검증 → 검색

    발생 가능한 예외: ValueError (입력 오류)
    """
    config = config or AppConfig()
    parser = ParserSkill(
        default_depart_after=config.default_depart_after,
        default_return_limit=config.default_return_limit,
    )
    validator = ValidationSkill(timetables)
    engine = RoundTripSkill(timetables, min_stay=config.min_stay)

    if raw.get("destination"):
        query = validator.validate_fixed(parser.parse_fixed(raw))
        logger.info("목적지 고정 검색: %s", query.summary())
        return engine.run_fixed(query)

    open_query = validator.validate_open(parser.parse_open(raw, now))
    logger.info("자유 검색: %s", open_query.summary())
    return engine.run_open(open_query)


def cli_entry() -> None:
    """CLI 진입점 (pyproject.toml scripts에서 호출)"""
    sys.exit(main())


def main(argv: Optional[list[str]] = None) -> int:
    config = AppConfig()
    parser = build_parser(config)
    args = parser.parse_args(argv)

    setup_logging(
        level=args.log_level,
        log_file=args.log_file,
    )

    try:
        line = validate_line(args.line)
    except ValueError as e:
        parser.error(str(e))

    if args.data_dir is not None:
        config.data_dir = args.data_dir

    try:
        timetables = asyncio.run(load_timetables(config.sources(), config))
    except TimetableLoadError as e:
        logger.error("%s", e)
        print(f"  [오류] 시각표를 불러오지 못했습니다: {e}", file=sys.stderr)
        return 1

    if args.list_stations:
        for name, pos in station_options(canonical_stations(timetables, line)):
            print(f"{pos:2d} {name}")
        return 0

    if args.origin:
        raw = ParserSkill.parse_cli(args)
        raw["line"] = line
    else:
        raw = interactive_input(timetables, line)

    try:
        result = search(timetables, raw, datetime.now(), config)
    except ValueError as e:
        print(f"  [오류] {e}", file=sys.stderr)
        return 2

    print(TextRenderer().render(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
