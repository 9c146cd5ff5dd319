"""
rolecall.services.role_resolver — Role Name Resolution
=======================================================

Turns bare-name definitions (``<@Pingable> 🔔``) into concrete role ids.
An existing role with exactly that name is reused; otherwise a new role is
created.

Batch resolution is concurrent and all-or-nothing from the caller's point
of view, but not transactional: roles created by definitions that
succeeded stay created when a sibling fails.
"""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from collections.abc import Sequence

import discord

from rolecall.engine.definitions import RoleDefinition
from rolecall.errors import ResolutionError

logger = logging.getLogger(__name__)

CREATE_REASON = "Rolecall: role requested by a reaction role board"


async def resolve_definition(definition: RoleDefinition, guild: discord.Guild) -> RoleDefinition:
    """Return *definition* with ``role_id`` filled in.

    Already-resolved definitions are returned unchanged without touching
    Discord.  Name matching is exact and case-sensitive; the first match
    wins when several roles share a name.

    Raises
    ------
    ResolutionError
        If Discord rejects listing the guild's roles or creating the role.
    """
    if definition.resolved:
        return definition

    try:
        roles = await guild.fetch_roles()
    except discord.HTTPException as exc:
        raise ResolutionError(definition.name, str(exc)) from exc

    existing = next((r for r in roles if r.name == definition.name), None)
    if existing is not None:
        return dataclasses.replace(definition, role_id=str(existing.id))

    try:
        role = await guild.create_role(name=definition.name, reason=CREATE_REASON)
    except discord.HTTPException as exc:
        raise ResolutionError(definition.name, str(exc)) from exc

    logger.info(
        "Created role '%s' (ID: %d) in guild %s",
        role.name, role.id, guild.id,
    )
    return dataclasses.replace(definition, role_id=str(role.id))


async def resolve_definitions(
    definitions: Sequence[RoleDefinition],
    guild: discord.Guild,
) -> list[RoleDefinition]:
    """Resolve every definition concurrently, preserving input order.

    Waits for every resolution to settle before returning or raising, so
    no create request is still in flight when the caller reports failure.

    Raises
    ------
    ResolutionError
        The first failure in input order, if any definition failed.
    """
    results = await asyncio.gather(
        *(resolve_definition(d, guild) for d in definitions),
        return_exceptions=True,
    )

    failures = [r for r in results if isinstance(r, BaseException)]
    if failures:
        created = sum(
            1 for before, after in zip(definitions, results)
            if not before.resolved and isinstance(after, RoleDefinition)
        )
        logger.warning(
            "Role resolution failed for %d/%d definitions in guild %s "
            "(%d resolved by name and kept)",
            len(failures), len(definitions), guild.id, created,
        )
        raise failures[0]

    return list(results)
