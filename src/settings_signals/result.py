"""LookupResult — the outcome of a single settings provider lookup."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LookupResult:
    """Immutable result returned by a provider's ``lookup``.

    Attributes:
        value: The raw setting value.  Always ``""`` when ``ok`` is ``False``.
        ok:    ``True`` if the provider found a value for the key.  A key that
               is unset, unsupported or NULL yields ``ok=False``.
    """

    value: str = ""
    ok: bool = False

    # ── Factory helpers ──────────────────────────────────────

    @staticmethod
    def found(value: str) -> LookupResult:
        if value is None:
            raise ValueError("found() requires a value; use LookupResult.missing()")
        return LookupResult(value=value, ok=True)

    @staticmethod
    def missing() -> LookupResult:
        return LookupResult()
