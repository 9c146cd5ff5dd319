"""
tests/test_render.py — Board Renderer Tests
=============================================
"""

from __future__ import annotations

from rolecall.engine.definitions import RoleDefinition, parse_definitions
from rolecall.engine.render import render_board

BOARD = (
    "Pick your roles!\n"
    "<@&111> :one:\n"
    "<@Gamers> \U0001f3ae for game nights\n"
    "Ask <@Nobody> if unsure"
)

RESOLVED = [
    RoleDefinition("111", "", ":one:"),
    RoleDefinition("999", "Gamers", "\U0001f3ae"),
]


class TestRenderBoard:

    def test_bare_names_become_concrete_mentions(self):
        board = render_board(BOARD, RESOLVED)
        assert "<@&999> \U0001f3ae for game nights" in board.text
        assert "<@Gamers>" not in board.text

    def test_concrete_mentions_untouched(self):
        board = render_board(BOARD, RESOLVED)
        assert "<@&111> :one:" in board.text

    def test_unknown_bare_name_left_as_is(self):
        board = render_board(BOARD, RESOLVED)
        assert "Ask <@Nobody> if unsure" in board.text

    def test_free_text_preserved(self):
        board = render_board(BOARD, RESOLVED)
        assert board.text.startswith("Pick your roles!\n")
        assert board.text.count("\n") == BOARD.count("\n")

    def test_every_occurrence_of_a_name_is_rewritten(self):
        text = "<@Gamers> \U0001f3ae\nReminder: <@Gamers> meet on Fridays"
        board = render_board(text, [RoleDefinition("999", "Gamers", "\U0001f3ae")])
        assert board.text == "<@&999> \U0001f3ae\nReminder: <@&999> meet on Fridays"

    def test_emoji_in_definition_order_with_duplicates(self):
        defs = [
            RoleDefinition("1", "", "\U0001f514"),
            RoleDefinition("2", "", ":two:"),
            RoleDefinition("3", "", "\U0001f514"),
        ]
        assert render_board("", defs).emoji == ["\U0001f514", ":two:", "\U0001f514"]

    def test_unresolved_definitions_do_not_rewrite(self):
        board = render_board("<@Gamers> \U0001f3ae", [RoleDefinition("", "Gamers", "\U0001f3ae")])
        assert board.text == "<@Gamers> \U0001f3ae"

    def test_rendered_text_parses_to_concrete_definitions(self):
        board = render_board(BOARD, RESOLVED)
        assert parse_definitions(board.text) == [
            RoleDefinition("111", "", ":one:"),
            RoleDefinition("999", "", "\U0001f3ae"),
        ]
