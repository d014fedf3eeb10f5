"""입력 파싱/검증 스킬 테스트"""

import argparse
from datetime import datetime

import pytest

from src.models.query import FixedQuery, OpenQuery
from src.models.timetable import TimetableSet
from src.skills.parser import ParserSkill
from src.skills.validation import ValidationSkill

NOW = datetime(2026, 5, 3, 10, 25)


class TestParserSkill:
    def test_min_stay(self):
        assert ParserSkill.parse_min_stay("30") == 30
        assert ParserSkill.parse_min_stay(" 15 ") == 15

    def test_min_stay_unparsable_defaults_to_zero(self):
        assert ParserSkill.parse_min_stay("") == 0
        assert ParserSkill.parse_min_stay("abc") == 0
        assert ParserSkill.parse_min_stay(None) == 0

    def test_negative_min_stay_clamped_to_zero(self):
        assert ParserSkill.parse_min_stay("-30") == 0
        assert ParserSkill.parse_min_stay(-5) == 0

    def test_depart_after_now(self):
        assert ParserSkill.resolve_depart_after("now", NOW) == 625

    def test_depart_after_clock(self):
        assert ParserSkill.resolve_depart_after("9:30", NOW) == 570

    def test_parse_open_defaults(self):
        data = ParserSkill().parse_open({"line": "main", "origin": "0"}, NOW)
        assert data["depart_after_minutes"] == 625
        assert data["return_limit_minutes"] == 1020

    def test_parse_open_configured_defaults(self):
        parser = ParserSkill(default_depart_after="8:00", default_return_limit="11:00")
        data = parser.parse_open({"line": "main", "origin": "0"}, NOW)
        assert data["depart_after_minutes"] == 480
        assert data["return_limit_minutes"] == 660

    def test_parse_fixed(self):
        data = ParserSkill().parse_fixed(
            {"line": " main ", "origin": "A", "destination": "E", "min_stay": "x"}
        )
        assert data == {"line": "main", "origin": "A", "destination": "E", "min_stay": 0}

    def test_parse_cli(self):
        args = argparse.Namespace(
            line="main", origin=" A ", destination=None,
            min_stay="0", depart_after="now", return_limit="17:00",
        )
        data = ParserSkill.parse_cli(args)
        assert data["origin"] == "A"
        assert data["destination"] is None


class TestValidationSkill:
    def test_fixed_by_name(self, sample_timetables):
        query = ValidationSkill(sample_timetables).validate_fixed(
            {"line": "main", "origin": "A", "destination": "E", "min_stay": 10}
        )
        assert query == FixedQuery(line="main", origin_pos=0, dest_pos=4, min_stay=10)

    def test_fixed_by_position(self, sample_timetables):
        query = ValidationSkill(sample_timetables).validate_fixed(
            {"line": "main", "origin": 1, "destination": "3"}
        )
        assert (query.origin_pos, query.dest_pos, query.min_stay) == (1, 3, 0)

    def test_same_station_is_not_validation_error(self, sample_timetables):
        query = ValidationSkill(sample_timetables).validate_fixed(
            {"line": "main", "origin": "C", "destination": "C"}
        )
        assert query.origin_pos == query.dest_pos == 2

    def test_open(self, sample_timetables):
        query = ValidationSkill(sample_timetables).validate_open(
            {"line": "井川線", "origin": "P",
             "depart_after_minutes": 480, "return_limit_minutes": 1020}
        )
        assert query == OpenQuery(
            line="ikawa", origin_pos=0,
            depart_after_minutes=480, return_limit_minutes=1020,
        )

    def test_unknown_station(self, sample_timetables):
        with pytest.raises(ValueError, match="없는 역"):
            ValidationSkill(sample_timetables).validate_fixed(
                {"line": "main", "origin": "Z", "destination": "A"}
            )

    def test_position_out_of_range(self, sample_timetables):
        with pytest.raises(ValueError, match="범위"):
            ValidationSkill(sample_timetables).validate_fixed(
                {"line": "main", "origin": 0, "destination": 5}
            )

    def test_missing_origin(self, sample_timetables):
        with pytest.raises(ValueError, match="출발역"):
            ValidationSkill(sample_timetables).validate_open(
                {"line": "main", "origin": " ",
                 "depart_after_minutes": 0, "return_limit_minutes": 0}
            )

    def test_unknown_line(self, sample_timetables):
        with pytest.raises(ValueError, match="지원하지 않는 노선"):
            ValidationSkill(sample_timetables).validate_line("yamanote")

    def test_missing_line(self, sample_timetables):
        with pytest.raises(ValueError, match="노선"):
            ValidationSkill(sample_timetables).validate_line("")

    def test_bool_is_not_a_position(self, sample_timetables):
        with pytest.raises(ValueError, match="출발역"):
            ValidationSkill(sample_timetables).validate_fixed(
                {"line": "main", "origin": True, "destination": "A"}
            )


class TestDigitStationNames:
    @pytest.fixture
    def digit_named(self) -> TimetableSet:
        """역 이름이 숫자인 노선: "2"는 위치 0"""
        raw = {
            "down": {
                "stations": ["2", "A", "B"],
                "trains": [{"trainNumber": "1", "times": ["09:00", "09:10", "09:20"]}],
            },
            "up": {
                "stations": ["B", "A", "2"],
                "trains": [{"trainNumber": "2", "times": ["10:00", "10:10", "10:20"]}],
            },
        }
        return TimetableSet.from_raw({"main": raw})

    def test_name_takes_precedence_over_position(self, digit_named):
        validator = ValidationSkill(digit_named)
        assert validator.resolve_station("main", "2", "출발역") == 0

    def test_digit_without_matching_name_is_position(self, digit_named):
        validator = ValidationSkill(digit_named)
        assert validator.resolve_station("main", "1", "목적지") == 1

    def test_int_is_position(self, digit_named):
        validator = ValidationSkill(digit_named)
        assert validator.resolve_station("main", 2, "목적지") == 2
