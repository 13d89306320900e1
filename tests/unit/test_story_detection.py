"""
Tests for life story detection.

Each trigger family is exercised on its own so a change to one rule shows up
as a failure against that rule's name.
"""

import pytest

from reminiscence.detector import STORY_TRIGGERS, detect_story, matching_triggers


class TestDetectStory:
    """detect_story() over whole utterances."""

    def test_reminiscing_phrase_is_a_story(self):
        assert detect_story("I used to live by the sea") is True

    def test_small_talk_is_not_a_story(self, sample_small_talk):
        assert detect_story(sample_small_talk) is False

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_input_is_not_a_story(self, text):
        assert detect_story(text) is False

    def test_case_insensitive(self):
        assert detect_story("WHEN I WAS A GIRL WE HAD NOTHING") is True

    @pytest.mark.parametrize("text", [
        "Could you pass the salt please?",
        "Is it going to rain this afternoon?",
        "My tea has gone cold",
        "The nurse said the doctor is coming at three",
    ])
    def test_everyday_remarks_are_not_stories(self, text):
        assert detect_story(text) is False

    def test_result_does_not_depend_on_trigger_order(self, sample_story):
        """Every trigger that fires agrees on the outcome."""
        assert detect_story(sample_story) == bool(matching_triggers(sample_story))


class TestTriggerFamilies:
    """One case per trigger family."""

    @pytest.mark.parametrize("name,text", [
        ("reminiscing", "I remember the smell of the bakery"),
        ("reminiscing", "I recall a very cold winter"),
        ("reminiscing", "I once met the Queen"),
        ("reminiscing", "Back in those times nobody had a telly"),
        ("reminiscing", "In my day you walked everywhere"),
        ("family_habit", "My late husband always whistled in the mornings"),
        ("family_habit", "my mum loved a good sing-song"),
        ("reminiscing", "I remembered the trams on Sauchiehall Street"),
        ("reminiscing", "I recalled how cold the tenement was"),
        ("family_habit", "My dad wouldn't let us out after dark"),
        ("era", "That was during the war"),
        ("era", "Everything changed after the war"),
        ("era", "We had a Morris Minor in the 60s"),
        ("era", "Skirts were short in the 1960s"),
        ("life_transition", "When I retired we bought a caravan"),
        ("life_transition", "when I grew up things were different"),
        ("first_time", "My first car was a Ford Anglia"),
        ("first_time", "my first day at the mill was terrifying"),
        ("nostalgic_place", "The old neighbourhood had a corner shop"),
        ("nostalgic_place", "I miss the old days"),
        ("origin", "We lived in a tenement in Govan"),
        ("origin", "She was born in Dundee"),
        ("origin", "raised in the country, that's me"),
    ])
    def test_family_matches(self, name, text):
        assert name in matching_triggers(text)
        assert detect_story(text) is True

    def test_trigger_table_has_seven_named_families(self):
        names = [name for name, _ in STORY_TRIGGERS]
        assert names == [
            "reminiscing",
            "family_habit",
            "era",
            "life_transition",
            "first_time",
            "nostalgic_place",
            "origin",
        ]

    def test_family_habit_needs_a_habit_verb(self):
        assert "family_habit" not in matching_triggers("My husband is visiting on Sunday")

    def test_decade_reference_needs_a_round_number(self):
        assert "era" not in matching_triggers("Bus number in the 42s")

    def test_matching_triggers_reports_every_family(self):
        text = "I grew up in Leith and my first job was at the docks"
        assert matching_triggers(text) == ["first_time", "origin"]
