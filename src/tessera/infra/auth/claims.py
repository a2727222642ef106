"""Convert decoded JWT payloads into ordered claims.

The payload is assumed to be already validated by an upstream
authentication layer; nothing here checks signatures or expiry.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from tessera.foundation.domain.login import DEFAULT_ISSUER, Claim

if TYPE_CHECKING:
    from collections.abc import Mapping

ISSUER_CLAIM = "iss"


def claims_from_jwt(payload: Mapping[str, Any], issuer: str | None = None) -> list[Claim]:
    """Flatten a decoded JWT payload into claims.

    Claims keep the payload's key order. A list value produces one claim
    per element; booleans become ``"true"``/``"false"``; objects are JSON
    encoded; ``None`` values are dropped.

    Args:
        payload: Decoded JWT claims dict.
        issuer: Issuer to stamp on every claim. Defaults to the payload's
            ``iss`` claim, then to ``DEFAULT_ISSUER``.

    Returns:
        Ordered claims, all with the same issuer.
    """
    if issuer is None:
        issuer = str(payload.get(ISSUER_CLAIM) or DEFAULT_ISSUER)

    claims: list[Claim] = []
    for claim_type, raw in payload.items():
        values = raw if isinstance(raw, (list, tuple)) else [raw]
        for value in values:
            if value is None:
                continue
            claims.append(Claim(type=claim_type, value=_claim_value(value), issuer=issuer))
    return claims


def _claim_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)
