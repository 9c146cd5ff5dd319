"""
Rolecall — Reaction Role Boards for Discord
============================================
Turns a moderator's free-text message of role mentions and emoji into a
published "board" where each reaction toggles a role for the reacting
member.  The board is its own source of truth: every reaction event
re-reads the live message, so editing a board changes its behavior
immediately and nothing is stored on the side.

Package layout::

    rolecall/
    ├── config.py          # YAML → typed Python config
    ├── constants.py       # Grammar pattern, colors, usage text
    ├── errors.py          # Error taxonomy
    ├── engine/
    │   ├── definitions.py # Board text → RoleDefinition list
    │   └── render.py      # Bare-name mentions → concrete role mentions
    ├── services/
    │   ├── role_resolver.py          # Name → role id, create on demand
    │   ├── board_service.py          # Publish embed + attach reactions
    │   ├── reconciliation_service.py # Reaction event → role toggle
    │   └── embeds.py                 # Embed builders
    └── bot/
        ├── core.py        # Bot subclass, cog loader
        └── cogs/
            └── reaction_roles.py  # reaction-role command + listeners
"""

__version__ = "0.1.0"
