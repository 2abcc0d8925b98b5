"""Role hierarchy comparison."""

import logging
from typing import Optional, Union

from ....config.constants import ROLE_RANKS, Role

logger = logging.getLogger(__name__)


def coerce_role(value: Union[Role, str, None]) -> Optional[Role]:
    """Convert a stored role value to a Role, None when unknown."""
    if value is None or isinstance(value, Role):
        return value
    try:
        return Role(str(value).lower())
    except ValueError:
        logger.warning(f"Unknown role value '{value}'")
        return None


def role_satisfies(actor_role: Union[Role, str, None], required_role: Union[Role, str]) -> bool:
    """Check that the actor's role ranks at or above the required role.

    An absent or unknown actor role only satisfies the guest bar.
    """
    required = coerce_role(required_role)
    if required is None:
        raise ValueError(f"Unknown required role '{required_role}'")

    actor = coerce_role(actor_role)
    actor_rank = ROLE_RANKS[actor] if actor is not None else ROLE_RANKS[Role.GUEST]
    return actor_rank >= ROLE_RANKS[required]
