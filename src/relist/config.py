"""Relist configuration.

RelistConfig is the central configuration object, frozen after creation.
"""

from dataclasses import dataclass

from relist._errors import ConfigError
from relist._types import LookupStrategy

LOOKUP_STRATEGIES: frozenset[str] = frozenset({"linear", "hashed"})
_FLAG_FIELDS = ("strict", "report_errors", "profile")


@dataclass(frozen=True, slots=True)
class RelistConfig:
    """Configuration for an item store.

    Attributes:
        strict: Re-raise exceptions that occur during ``animate_to`` instead
            of returning them in the ``ReconcileResult``.
        lookup: Equality lookup strategy for the reconciler. ``"linear"``
            scans with ``==``; ``"hashed"`` counts values in dictionaries and
            falls back to ``"linear"`` when an item is unhashable.
        report_errors: Print swallowed reconcile errors to stderr.
        profile: Time each reconcile phase and print a one-line summary.
        max_events: Capacity of the event log created for a collector.

    """

    strict: bool = False
    lookup: LookupStrategy = "linear"
    report_errors: bool = True
    profile: bool = False
    max_events: int = 10_000

    def __post_init__(self) -> None:
        for name in _FLAG_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                msg = f"{name} must be true or false, got {value!r}"
                raise ConfigError(msg)
        if isinstance(self.max_events, bool) or not isinstance(self.max_events, int):
            msg = f"max_events must be an integer, got {self.max_events!r}"
            raise ConfigError(msg)
        if not isinstance(self.lookup, str) or self.lookup not in LOOKUP_STRATEGIES:
            msg = (
                f"Unknown lookup strategy {self.lookup!r}; "
                f"expected one of {sorted(LOOKUP_STRATEGIES)}"
            )
            raise ConfigError(msg)
        if self.max_events <= 0:
            msg = f"max_events must be positive, got {self.max_events}"
            raise ConfigError(msg)
