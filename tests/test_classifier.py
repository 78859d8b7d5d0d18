"""Tests for command and small-talk classification."""

import pytest

from ram.services.classifier import Classifier
from ram.services.intent import Command, ConversationType, IntentKind


class TestAdminCommands:
    def setup_method(self):
        self.classifier = Classifier()

    @pytest.mark.parametrize(
        "text,command",
        [
            ("ram sudo mode", Command.ACTIVATE_ADMIN),
            ("Hey RAM SUDO MODE please", Command.ACTIVATE_ADMIN),
            ("ram exit sudo", Command.DEACTIVATE_ADMIN),
            ("RAM NUKE DATABASE", Command.NUKE_DATABASE),
        ],
    )
    def test_admin_phrases(self, text, command):
        result = self.classifier.classify(text)
        assert result.kind is IntentKind.COMMAND
        assert result.command is command
        assert result.raw_text == text

    def test_first_rule_wins(self):
        result = self.classifier.classify("ram sudo mode ram exit sudo")
        assert result.command is Command.ACTIVATE_ADMIN


class TestNickname:
    def setup_method(self):
        self.classifier = Classifier()

    @pytest.mark.parametrize(
        "text,name",
        [
            ("call me Alex.", "Alex"),
            ("Call me alex", "alex"),
            ("My name is maria!", "maria"),
            ("mi nombre es Lucía", "Lucía"),
            ("Llámame Pepe", "Pepe"),
            ("llamame pepe", "pepe"),
        ],
    )
    def test_extracts_name(self, text, name):
        result = self.classifier.classify(text)
        assert result.conversation is ConversationType.SET_NICKNAME
        assert result.nickname == name

    def test_trigger_without_name_is_not_a_nickname(self):
        assert self.classifier.classify("call me") is None

    def test_trigger_must_lead(self):
        result = self.classifier.classify("Remind John to call me tomorrow")
        assert result is None


class TestConversation:
    def setup_method(self):
        self.classifier = Classifier()

    @pytest.mark.parametrize("text", ["hello there", "Hey!", "Hola, buenas tardes", "yo"])
    def test_greetings(self, text):
        assert self.classifier.classify(text).conversation is ConversationType.GREETING

    @pytest.mark.parametrize(
        "text", ["Hi, meeting at 5", "hey gym tomorrow", "hey meet Bob tomorrow"]
    )
    def test_greeting_with_scheduling_hints_falls_through(self, text):
        assert self.classifier.classify(text) is None

    @pytest.mark.parametrize("text", ["help", "What can you do?", "¿Qué puedes hacer?"])
    def test_help(self, text):
        assert self.classifier.classify(text).conversation is ConversationType.HELP

    @pytest.mark.parametrize("text", ["How are you", "what's up", "¿Qué tal?", "¿cómo estás?"])
    def test_status(self, text):
        assert self.classifier.classify(text).conversation is ConversationType.STATUS

    @pytest.mark.parametrize("text", ["thanks!", "Thank you", "Gracias"])
    def test_gratitude(self, text):
        assert self.classifier.classify(text).conversation is ConversationType.GRATITUDE

    def test_greeting_checked_before_gratitude(self):
        result = self.classifier.classify("hey, thanks")
        assert result.conversation is ConversationType.GREETING

    @pytest.mark.parametrize(
        "text",
        [
            "this is it",
            "Can you book a table for you and me",
            "Lunch with Sam tomorrow at 1pm",
            "Yoga every friday",
        ],
    )
    def test_whole_words_only(self, text):
        assert self.classifier.classify(text) is None
