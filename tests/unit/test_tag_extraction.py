"""
Tests for topic tag extraction.
"""

import pytest

from reminiscence.tags import FAMILY_RULES, TOPIC_RULES, extract_era, extract_tags


class TestExtractTags:
    """extract_tags() ordering, de-duplication and idempotence."""

    def test_spouse_and_music_in_order(self):
        tags = extract_tags("My husband used to take me dancing every Friday")

        assert "family:spouse" in tags
        assert "topic:music" in tags
        assert tags.index("family:spouse") < tags.index("topic:music")
        assert len(tags) == len(set(tags))

    def test_idempotent(self, sample_story):
        assert extract_tags(sample_story) == extract_tags(sample_story)

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_input_has_no_tags(self, text):
        assert extract_tags(text) == []

    def test_order_is_era_then_family_then_topic(self):
        tags = extract_tags("In 1955 my wife and I had our wedding at the church next to the school")

        assert tags == [
            "era:1955",
            "family:spouse",
            "topic:education",
            "topic:marriage",
            "topic:faith",
        ]

    def test_one_tag_per_category_even_with_many_synonyms(self):
        tags = extract_tags("My son, my daughter and the kids, all the bairns together")

        assert tags.count("family:children") == 1

    def test_shared_synonym_tags_both_categories(self):
        tags = extract_tags("She was a teacher for forty years")

        assert "topic:work" in tags
        assert "topic:education" in tags

    def test_word_boundaries_are_respected(self):
        # "homework" is not "work", "grandmother" is not "mother"
        assert extract_tags("homework was done by grandmother") == []

    def test_multi_word_synonym(self):
        assert "family:children" in extract_tags("Bath time for the wee ones")

    def test_no_tags_for_small_talk(self, sample_small_talk):
        assert extract_tags(sample_small_talk) == []


class TestEra:
    """Era token extraction."""

    @pytest.mark.parametrize("text,expected", [
        ("We married in 1962", "era:1962"),
        ("Decimalisation came in 1971 I think", "era:1971"),
        ("My granddaughter was born in 2004", "era:2004"),
        ("Teddy boys in the 1950s", "era:1950s"),
        ("Oh, the sixties were wild", "era:the sixties"),
        ("Music was better in the Fifties", "era:the fifties"),
        ("nineties kids", "era:nineties"),
    ])
    def test_era_tokens(self, text, expected):
        assert extract_era(text) == expected
        assert extract_tags(text)[0] == expected

    def test_explicit_year_wins_over_decade_word(self):
        assert extract_era("the sixties, 1967 to be exact") == "era:1967"

    def test_years_outside_range_are_ignored(self):
        assert extract_era("Room 1805 please") is None

    def test_only_one_era_tag(self):
        tags = extract_tags("From 1962 to 1975 we lived in the seventies style")
        assert [t for t in tags if t.startswith("era:")] == ["era:1962"]


class TestRuleTables:
    """The rule tables themselves."""

    def test_family_rules_in_declared_order(self):
        assert [tag for tag, _ in FAMILY_RULES] == [
            "family:spouse",
            "family:mother",
            "family:father",
            "family:children",
            "family:sibling",
            "family:grandchildren",
        ]

    def test_topic_rules_in_declared_order(self):
        assert [tag for tag, _ in TOPIC_RULES] == [
            "topic:work",
            "topic:education",
            "topic:military",
            "topic:marriage",
            "topic:travel",
            "topic:food",
            "topic:garden",
            "topic:faith",
            "topic:music",
            "topic:sport",
        ]

    @pytest.mark.parametrize("tag,word", [
        ("family:mother", "mam"),
        ("family:father", "papa"),
        ("family:sibling", "sister"),
        ("family:grandchildren", "grandkids"),
        ("topic:military", "navy"),
        ("topic:travel", "seaside"),
        ("topic:food", "recipe"),
        ("topic:garden", "allotment"),
        ("topic:faith", "imam"),
        ("topic:sport", "cricket"),
    ])
    def test_each_rule_in_isolation(self, tag, word):
        pattern = dict(FAMILY_RULES + TOPIC_RULES)[tag]
        assert pattern.search(f"something about the {word} then")
