"""Tests for recurring weekday detection."""

import pytest

from ram.services.lexicon import fold
from ram.services.recurrence import RecurrenceExtractor, expand_weekday_range


class TestExpandWeekdayRange:
    def test_forward(self):
        assert expand_weekday_range(1, 5) == [1, 2, 3, 4, 5]

    def test_wraps_past_saturday(self):
        assert expand_weekday_range(5, 1) == [5, 6, 0, 1]

    def test_same_day(self):
        assert expand_weekday_range(3, 3) == [3]


class TestRecurrenceExtractor:
    def setup_method(self):
        self.extractor = RecurrenceExtractor()

    def extract(self, text):
        return self.extractor.extract(text, fold(text))

    @pytest.mark.parametrize(
        "text,weekdays",
        [
            ("every monday", [1]),
            ("Every Sunday morning", [0]),
            ("every friday to monday", [5, 6, 0, 1]),
            ("every mon-fri", [1, 2, 3, 4, 5]),
            ("every tuesday through thursday", [2, 3, 4]),
            ("cada lunes a viernes", [1, 2, 3, 4, 5]),
            ("todos los miércoles", [3]),
            ("todos los sábados", [6]),
            ("Saturdays", [6]),
            ("clases los jueves", [4]),
        ],
    )
    def test_weekdays(self, text, weekdays):
        assert self.extract(text).weekdays == weekdays

    def test_martes_is_still_tuesday(self):
        assert self.extract("cada martes").weekdays == [2]
        assert self.extract("every mar").weekdays == [2]

    def test_range_is_flagged(self):
        match = self.extract("Yoga every friday to monday at 7pm")
        assert match.is_range
        assert match.text == "every friday to monday"

    def test_range_with_unknown_end_falls_back_to_single(self):
        match = self.extract("todos los martes a las 6")
        assert not match.is_range
        assert match.weekdays == [2]
        assert match.text == "todos los martes"

    @pytest.mark.parametrize(
        "text",
        [
            "Dinner with friends",
            "every day",
            "Monday meeting",
            "random words xyz",
            "Dentist every March 2",
            "cada marzo 2 cumpleaños",
            "every marathon",
        ],
    )
    def test_no_recurrence(self, text):
        assert self.extract(text) is None
