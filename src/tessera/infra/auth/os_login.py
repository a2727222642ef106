"""Login of the operating-system user running the current process.

Builds identity claims from the process environment and parses them with
the ``WINDOWS`` factory. Unlike request logins, this bypasses the registry:
there is exactly one OS identity per process.
"""

from __future__ import annotations

import getpass
import os
import socket
import warnings

from tessera.foundation.domain.identity import DOMAIN_SEPARATOR, normalize_identity
from tessera.foundation.domain.login import Claim, Login
from tessera.infra.auth.providers import (
    CLAIM_TYPE_NAME,
    CLAIM_TYPE_PRIMARY_SID,
    WINDOWS,
)


def _user_domain() -> str:
    return os.environ.get("USERDOMAIN") or socket.gethostname().split(".", 1)[0]


def _user_subject(user: str, domain: str) -> str:
    getuid = getattr(os, "getuid", None)
    if getuid is not None:
        return str(getuid())
    return f"{domain}{DOMAIN_SEPARATOR}{user}"


def current_os_claims(issuer: str | None = None) -> list[Claim]:
    """Claims describing the OS user of this process.

    The subject is the numeric uid where the platform has one, otherwise
    the domain-qualified user name. The name is always ``DOMAIN\\user``.
    """
    issuer = issuer or WINDOWS.issuer
    user = getpass.getuser()
    domain = _user_domain()
    return [
        Claim(CLAIM_TYPE_PRIMARY_SID, _user_subject(user, domain), issuer),
        Claim(CLAIM_TYPE_NAME, f"{domain}{DOMAIN_SEPARATOR}{user}", issuer),
    ]


def get_current_os_login() -> Login:
    """Resolve the OS user of this process into a ``Windows`` login."""
    return WINDOWS.create(current_os_claims())


def get_current_os_user() -> str:
    """Return the normalized OS user name.

    Deprecated: use ``get_current_os_login().name``.
    """
    warnings.warn(
        "get_current_os_user is deprecated; use get_current_os_login",
        DeprecationWarning,
        stacklevel=2,
    )
    return normalize_identity(getpass.getuser())
