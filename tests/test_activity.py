"""Tests for activity title extraction."""

import pytest

from ram.services.activity import ActivityExtractor, cut_spans


class TestCutSpans:
    def test_removes_span(self):
        assert cut_spans("Gym at 7pm", [(7, 10)]) == "Gym at  "

    def test_overlapping_spans_merge(self):
        assert cut_spans("abcdefgh", [(2, 5), (4, 6)]) == "ab gh"

    def test_no_spans(self):
        assert cut_spans("Lunch", []) == "Lunch"


class TestActivityExtractor:
    def setup_method(self):
        self.extractor = ActivityExtractor()

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Can you please schedule a meeting with John", "Meeting with John"),
            ("Por favor agendar cita con el doctor", "Cita con doctor"),
            ("Lunch, with Bob!", "Lunch with Bob"),
            ("Dinner at home", "Dinner home"),
            ("Do laundry", "Laundry"),
            ("Cena mañana", "Cena"),
            ("bro book dentist tomorrow", "Dentist"),
            ("Dentist every", "Dentist"),
            ("Cumpleaños cada", "Cumpleaños"),
        ],
    )
    def test_cleanup(self, text, expected):
        assert self.extractor.extract(text) == expected

    def test_consumed_spans_are_removed(self):
        assert self.extractor.extract("Gym at 7pm", [(7, 10)]) == "Gym"

    def test_empty_result_uses_placeholder(self):
        assert self.extractor.extract("Please schedule") == "Meeting"

    def test_custom_placeholder(self):
        extractor = ActivityExtractor(placeholder="Event")
        assert extractor.extract("at the", []) == "Event"

    def test_only_first_letter_is_capitalised(self):
        assert self.extractor.extract("iPhone repair") == "IPhone repair"

    def test_clean_keeps_case(self):
        assert self.extractor.clean("please call NASA") == "call NASA"
