"""
tests/test_definitions.py — Board Text Parser Tests
=====================================================
Tests for ``parse_definitions`` and ``split_channel_reference``.
"""

from __future__ import annotations

import re

import pytest

from rolecall.constants import BOARD_PATTERN, USAGE_TEXT
from rolecall.engine.definitions import (
    RoleDefinition,
    parse_definitions,
    split_channel_reference,
)


class TestParseDefinitions:
    """Single-line and multi-line extraction."""

    def test_concrete_role_with_shortcode(self):
        defs = parse_definitions("<@&123> :smile:")
        assert defs == [RoleDefinition(role_id="123", name="", emoji=":smile:")]

    def test_bare_name_with_unicode_emoji(self):
        defs = parse_definitions("<@NewGroup> \U0001f389")
        assert defs == [RoleDefinition(role_id="", name="NewGroup", emoji="\U0001f389")]

    def test_name_may_contain_spaces(self):
        defs = parse_definitions("Get <@My New Cool Role> here \U0001f514")
        assert defs[0].name == "My New Cool Role"
        assert defs[0].emoji == "\U0001f514"

    def test_custom_emoji_token(self):
        defs = parse_definitions("<@&1> <:party:987654321>")
        assert defs[0].emoji == "<:party:987654321>"

    def test_animated_custom_emoji_token(self):
        defs = parse_definitions("<@&1> <a:dance:42>")
        assert defs[0].emoji == "<a:dance:42>"

    @pytest.mark.parametrize("symbol", ["©", "®", "❤", "\U0001f680", "\U0001f9e0"])
    def test_symbol_ranges(self, symbol):
        defs = parse_definitions(f"<@&7> {symbol}")
        assert defs[0].emoji == symbol

    def test_general_punctuation_counts_as_emoji(self):
        # U+2014 sits inside the U+2000..U+3300 symbol block
        defs = parse_definitions("<@&7> \u2014 the announcements role \U0001f4e2")
        assert defs[0].emoji == "\u2014"

    def test_document_order_is_preserved(self):
        text = (
            "Pick your roles!\n"
            "<@&111> :one:\n"
            "<@Gamers> \U0001f3ae for game nights\n"
            "\n"
            "<@&222> <:custom:333>\n"
        )
        defs = parse_definitions(text)
        assert defs == [
            RoleDefinition("111", "", ":one:"),
            RoleDefinition("", "Gamers", "\U0001f3ae"),
            RoleDefinition("222", "", "<:custom:333>"),
        ]

    def test_first_emoji_after_role_wins(self):
        defs = parse_definitions("<@&1> \U0001f514 and also \U0001f389")
        assert len(defs) == 1
        assert defs[0].emoji == "\U0001f514"

    def test_two_roles_one_emoji_binds_last_role(self):
        defs = parse_definitions("<@&1> <@&2> \U0001f389")
        assert defs == [RoleDefinition("2", "", "\U0001f389")]

    def test_trailing_role_without_emoji_falls_back_to_earlier_role(self):
        defs = parse_definitions("<@A> \U0001f389 <@B>")
        assert defs == [RoleDefinition("", "A", "\U0001f389")]

    def test_emoji_on_next_line_does_not_pair(self):
        assert parse_definitions("<@&1>\n\U0001f389") is None

    def test_emoji_before_role_does_not_pair(self):
        assert parse_definitions("\U0001f389 <@&1>") is None

    def test_no_role_reference(self):
        assert parse_definitions("Just some text :smile: \U0001f389") is None

    def test_empty_text(self):
        assert parse_definitions("") is None

    def test_lines_without_emoji_are_skipped(self):
        defs = parse_definitions("<@&1> no emoji here\n<@&2> \U0001f514")
        assert [d.role_id for d in defs] == ["2"]


class TestRoleDefinition:

    def test_resolved_and_mention(self):
        d = RoleDefinition("555", "Pingable", "\U0001f514")
        assert d.resolved
        assert d.mention == "<@&555>"

    def test_unresolved(self):
        assert not RoleDefinition("", "Pingable", "\U0001f514").resolved


class TestSplitChannelReference:

    def test_strips_leading_channel(self):
        channel_id, rest = split_channel_reference("  <#42> Roles!\n<@&1> :one:")
        assert channel_id == 42
        assert rest == "Roles!\n<@&1> :one:"

    def test_channel_must_lead(self):
        channel_id, rest = split_channel_reference("Roles <#42>")
        assert channel_id is None
        assert rest == "Roles <#42>"

    def test_empty_body(self):
        assert split_channel_reference("") == (None, "")


class TestUsageText:

    def test_usage_quotes_the_exact_pattern(self):
        assert BOARD_PATTERN in USAGE_TEXT

    def test_pattern_compiles(self):
        assert re.compile(BOARD_PATTERN, re.MULTILINE).groups == 3
