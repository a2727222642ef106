"""Table-driven login factory.

Every identity provider is described by one ``LoginFactory`` value: which
claim types it recognizes, which login field each one fills, how the raw
claim value is converted, and which fields must be present afterwards.
Provider variants are data, not subclasses, so the set of providers is
whatever the registry was built with.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from tessera.foundation.domain.exceptions import LoginValidationError
from tessera.foundation.domain.login import Login, ProviderKind

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from tessera.foundation.domain.login import Claim


_TRUE_VALUES = frozenset({"true"})
_FALSE_VALUES = frozenset({"false"})


def parse_bool(value: str) -> bool:
    """Parse a boolean claim value.

    Accepts ``true``/``false`` in any case, ignoring surrounding whitespace.

    Raises:
        ValueError: If the value is anything else.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    msg = f"'{value}' is not a valid boolean"
    raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class RequiredField:
    """A login field that must be non-empty after parsing.

    Attributes:
        name: Login field name (e.g., ``"subject"``).
        claim: Human name of the claim that supplies it, used in errors.
        hint: Optional remediation advice appended to the error reason.
    """

    name: str
    claim: str
    hint: str = ""

    def reason(self) -> str:
        reason = f"missing {self.claim} claim"
        return f"{reason}. {self.hint}" if self.hint else reason


@dataclass(frozen=True, slots=True, eq=False)
class LoginFactory:
    """Maps the claims of one issuer onto a ``Login``.

    Attributes:
        provider: Provider tag stamped on every login this factory builds.
        issuer: Issuer string the factory is registered under.
        claim_map: Recognized claim type -> login field name.
        required: Fields validated after parsing, in reporting order.
        converters: Login field name -> transform applied to the raw value.
        defaults: Initial field values, overwritten by matching claims.
    """

    provider: ProviderKind
    issuer: str
    claim_map: Mapping[str, str]
    required: tuple[RequiredField, ...] = ()
    converters: Mapping[str, Callable[[str], Any]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    defaults: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "claim_map", MappingProxyType(dict(self.claim_map)))
        object.__setattr__(self, "converters", MappingProxyType(dict(self.converters)))
        object.__setattr__(self, "defaults", MappingProxyType(dict(self.defaults)))

    def create(self, claims: Iterable[Claim]) -> Login:
        """Build a login from a claim sequence.

        Claims are visited once, in order. A recognized claim overwrites
        whatever an earlier claim of the same type wrote, so the last
        occurrence wins. Unrecognized claim types are ignored.

        Args:
            claims: Claims of a single authenticated principal.

        Returns:
            The validated login.

        Raises:
            LoginValidationError: If a required field is missing or a claim
                value cannot be converted.
        """
        values: dict[str, Any] = dict(self.defaults)
        for claim in claims:
            target = self.claim_map.get(claim.type)
            if target is None:
                continue
            values[target] = self._convert(target, claim.value)

        for required in self.required:
            if not values.get(required.name):
                raise LoginValidationError(
                    str(self.provider),
                    self.issuer,
                    required.name,
                    required.reason(),
                )

        return Login(provider=self.provider, **values)

    def _convert(self, target: str, raw: str) -> Any:
        converter = self.converters.get(target)
        if converter is None:
            return raw
        try:
            return converter(raw)
        except ValueError as exc:
            raise LoginValidationError(
                str(self.provider),
                self.issuer,
                target,
                str(exc),
                error_code="INVALID_CLAIM",
            ) from exc
