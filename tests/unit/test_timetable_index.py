"""시각표 인덱스 / 시각표 모델 테스트"""

import pytest

from src.models.timetable import DirectionalTimetable, TimetableSet, Train
from src.skills.timetable_index import (
    canonical_stations,
    resolve_row_index,
    station_position,
)


class TestResolveRowIndex:
    def test_found(self, sample_timetables):
        up = sample_timetables.line("main").up
        assert resolve_row_index(up, "E") == 0
        assert resolve_row_index(up, "A") == 4

    def test_not_found(self, sample_timetables):
        up = sample_timetables.line("ikawa").up
        assert resolve_row_index(up, "Q") is None


class TestCanonicalStations:
    def test_uses_down_order(self, sample_timetables):
        assert canonical_stations(sample_timetables, "main") == ("A", "B", "C", "D", "E")

    def test_ikawa_includes_station_missing_from_up(self, sample_timetables):
        assert canonical_stations(sample_timetables, "ikawa") == ("P", "Q", "R")

    def test_unknown_line(self, sample_timetables):
        with pytest.raises(KeyError):
            canonical_stations(sample_timetables, "nowhere")

    def test_station_position(self, sample_timetables):
        assert station_position(sample_timetables, "main", " C ") == 2
        assert station_position(sample_timetables, "main", "Z") is None


class TestTimetableModels:
    def test_length_mismatch_rejected(self):
        with pytest.raises(ValueError, match="시각 수"):
            DirectionalTimetable(
                line="main",
                direction="down",
                stations=("A", "B"),
                trains=(Train("1", "普通", ("09:00",)),),
            )

    def test_empty_string_is_no_stop(self):
        t = Train("1", "普通", ("09:00", ""))
        assert t.stop_time(0) == "09:00"
        assert t.stop_time(1) is None

    def test_from_raw_missing_direction(self, main_raw):
        with pytest.raises(ValueError, match="up"):
            TimetableSet.from_raw({"main": {"down": main_raw["down"]}})

    def test_from_dict_missing_key(self):
        with pytest.raises(ValueError, match="형식 오류"):
            DirectionalTimetable.from_dict("main", "down", {"stations": ["A"]})

    def test_set_is_read_only(self, sample_timetables):
        with pytest.raises(TypeError):
            sample_timetables.lines["other"] = sample_timetables.line("main")
        with pytest.raises(AttributeError):
            sample_timetables.lines = {}

    def test_line_ids(self, sample_timetables):
        assert set(sample_timetables.line_ids) == {"main", "ikawa"}
        assert "main" in sample_timetables
