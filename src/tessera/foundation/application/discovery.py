"""Entry-point-based discovery of login factories.

Packages contribute providers by declaring an entry point in the
``tessera.login_factories`` group whose value is a ``LoginFactory``.
Loading uses Python's standard ``importlib.metadata.entry_points()``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib.metadata import entry_points
from typing import Any

logger = logging.getLogger(__name__)

LOGIN_FACTORY_GROUP = "tessera.login_factories"


@dataclass(frozen=True, slots=True)
class DiscoveredContribution:
    """A single discovered entry point contribution.

    Attributes:
        name: Entry point name (e.g., ``"google"``).
        group: Entry point group (e.g., ``"tessera.login_factories"``).
        value: The loaded Python object.
    """

    name: str
    group: str
    value: Any


def discover(
    group: str = LOGIN_FACTORY_GROUP,
    *,
    exclude_names: frozenset[str] = frozenset(),
) -> list[DiscoveredContribution]:
    """Discover and load all entry points for a given group.

    Entry points are returned sorted by name so that registry construction
    is deterministic. An entry point that fails to import is a broken
    installation and the error propagates.

    Args:
        group: The entry point group name.
        exclude_names: Set of entry point names to skip.

    Returns:
        List of loaded contributions.
    """
    contributions: list[DiscoveredContribution] = []
    eps = sorted(entry_points(group=group), key=lambda ep: ep.name)

    for ep in eps:
        if ep.name in exclude_names:
            logger.debug("Skipping excluded entry point %s:%s", group, ep.name)
            continue
        loaded = ep.load()
        contributions.append(DiscoveredContribution(name=ep.name, group=group, value=loaded))
        logger.debug("Loaded entry point %s:%s", group, ep.name)

    logger.info("Discovered %d contributions in group %r", len(contributions), group)
    return contributions
