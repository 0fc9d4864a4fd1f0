"""Engine options and the adapter that builds them from plain mappings."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields

from discard_duplicates.errors import OptionsError

# Spellings accepted by from_mapping, including the camelCase form used by
# build-tool configuration files.
_ALIASES: dict[str, str] = {
    "reverse_removal": "reverse_removal",
    "reverseRemoval": "reverse_removal",
}


@dataclass(frozen=True)
class DedupeOptions:
    """Configuration for a deduplication run.

    Attributes:
        reverse_removal: When False (the default) the later member of a
            redundant pair survives, as the cascade would have it.  When True
            the earlier member is kept and the later one is removed.
    """

    reverse_removal: bool = False

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> DedupeOptions:
        """Build options from a mapping, accepting snake_case or camelCase keys."""
        kwargs: dict[str, object] = {}
        for key, value in raw.items():
            name = _ALIASES.get(key)
            if name is None:
                raise OptionsError(f"Unknown option: {key!r}", key=key)
            if not isinstance(value, bool):
                raise OptionsError(
                    f"Option {key!r} must be a bool, got {type(value).__name__}",
                    key=key,
                )
            if name in kwargs:
                raise OptionsError(f"Option {key!r} given more than once", key=key)
            kwargs[name] = value
        return cls(**kwargs)  # type: ignore[arg-type]

    def as_dict(self) -> dict[str, object]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def resolve_options(
    options: DedupeOptions | Mapping[str, object] | None,
) -> DedupeOptions:
    """Normalise whatever the caller passed into a DedupeOptions instance."""
    if options is None:
        return DedupeOptions()
    if isinstance(options, DedupeOptions):
        return options
    if isinstance(options, Mapping):
        return DedupeOptions.from_mapping(options)
    raise OptionsError(
        f"Options must be DedupeOptions or a mapping, got {type(options).__name__}"
    )
