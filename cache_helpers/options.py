"""
Per-entry options passed through to the distributed cache.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Union

from .errors import ValidationError


@dataclass(frozen=True)
class EntryOptions:
    """Expiration metadata attached to a cache entry.

    ``absolute_expiration_relative_to_now`` of ``None`` leaves expiry to
    the backend's default.
    """

    absolute_expiration_relative_to_now: Optional[timedelta] = None

    def __post_init__(self):
        expiry = self.absolute_expiration_relative_to_now
        if expiry is None:
            return
        if not isinstance(expiry, timedelta):
            raise ValidationError(
                "Expiration must be a timedelta",
                {"type": type(expiry).__name__}
            )
        if expiry <= timedelta(0):
            raise ValidationError(
                "Expiration must be positive",
                {"seconds": expiry.total_seconds()}
            )

    @classmethod
    def expire_from_now(cls, delta: timedelta) -> "EntryOptions":
        return cls(absolute_expiration_relative_to_now=delta)


def coerce_options(options: Union["EntryOptions", timedelta, None]) -> EntryOptions:
    """Normalize the accepted option forms to an ``EntryOptions``."""
    if options is None:
        return EntryOptions()
    if isinstance(options, EntryOptions):
        return options
    if isinstance(options, timedelta):
        return EntryOptions.expire_from_now(options)
    raise ValidationError(
        "Options must be EntryOptions, timedelta or None",
        {"type": type(options).__name__}
    )
