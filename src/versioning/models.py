"""Data models for version resolution."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from platforms import Platform


class ArgumentKind(Enum):
    """How a resolved specifier is passed to the installer."""
    EXACT_VERSION = "version"
    CHANNEL = "channel"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class ResolvedArgument:
    """Outcome of resolving one specifier.

    ``flag`` is filled in by tagging for a platform; until then it is None.
    An UNRESOLVED argument carries no value and never a flag.
    """
    kind: ArgumentKind
    value: str = ""
    supports_quality: bool = False
    flag: Optional[str] = None

    @classmethod
    def unresolved(cls) -> "ResolvedArgument":
        return cls(kind=ArgumentKind.UNRESOLVED)

    @property
    def is_resolved(self) -> bool:
        return self.kind is not ArgumentKind.UNRESOLVED

    def for_platform(self, platform: Platform) -> "ResolvedArgument":
        """Return a copy carrying the platform's CLI flag spelling."""
        if not self.is_resolved:
            return self
        if self.kind is ArgumentKind.CHANNEL:
            return replace(self, flag=platform.channel_flag)
        return replace(self, flag=platform.version_flag)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "value": self.value,
            "supports_quality": self.supports_quality,
            "flag": self.flag,
        }


@dataclass(frozen=True)
class ReleaseIndexEntry:
    """One record of the releases-index document."""
    channel_version: str

    @property
    def major(self) -> str:
        return self.channel_version.split('.')[0]
