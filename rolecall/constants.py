"""
rolecall.constants — Shared Constants
======================================

Single source of truth for the board grammar, presentation colors and the
usage text.  The usage reply quotes :data:`BOARD_PATTERN` verbatim, so the
pattern lives here rather than inside the parser.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Board grammar
# ---------------------------------------------------------------------------
# Role reference: <@&DIGITS> (existing role) or <@NAME> (role to resolve).
ROLE_TOKEN_PATTERN = r"<@(?:&(\d+)|([^\n:<>@&]+))>"

# Emoji: custom token (<:name:id>, <a:name:id>, :shortcode:) or a single
# symbol from U+00A9, U+00AE, U+2000..U+3300 and the U+1F000..U+1FBFF planes.
EMOJI_TOKEN_PATTERN = (
    r"(?:<a?)?:[^\n: ]+:(?:\d+>)?"
    r"|(?:\u00a9|\u00ae|[\u2000-\u3300]|[\U0001F000-\U0001FBFF])"
)

# One definition: anything, a role token, anything, then an emoji.
BOARD_PATTERN = rf"^.*{ROLE_TOKEN_PATTERN}.*?({EMOJI_TOKEN_PATTERN})"

# Leading channel mention in the command body.
CHANNEL_PATTERN = r"^<#(\d+)>"

# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------
BOARD_COLOR = 0x2F4562
DEFAULT_MODERATOR_ROLE = "Wizard"
COMMAND_NAME = "reaction-role"

USAGE_TEXT = f"""\
Usage: {COMMAND_NAME} #channel-mention
Now you can type whatever you want here.
Any line that has a role @Mention and an :emoji:
will become a reaction assignable role.
If you have multiple roles you want to be assignable,
make sure each @Role and :emoji: are on separate lines.
You can also have the bot create roles that do not yet exist
by using <@My New Cool Role Name>, with an :emoji: on the same line.
Here is the exact pattern used, if you're curious:
```
{BOARD_PATTERN}
```
At least one reaction role is required."""
