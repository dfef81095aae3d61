"""Named payload presets that fill in zero/non-zero byte counts."""

from dataclasses import asdict, dataclass, replace
from typing import Dict, Tuple

from .errors import UnknownProfile
from .models import TransactionShape

CUSTOM_PROFILE = "custom"


@dataclass(frozen=True)
class DataProfile:
    name: str
    zero_bytes: int
    non_zero_bytes: int
    description: str

    @property
    def size(self) -> int:
        return self.zero_bytes + self.non_zero_bytes

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


_CATALOG: Tuple[DataProfile, ...] = (
    DataProfile("text", 0, 1, "Text (1 byte per character)"),
    DataProfile("date", 2, 8, "Date (10 bytes)"),
    DataProfile("number", 2, 2, "Number (4 bytes)"),
    DataProfile("hash", 0, 32, "Hash (32 bytes)"),
    DataProfile(CUSTOM_PROFILE, 0, 0, "Custom"),
)

DATA_PROFILES: Dict[str, DataProfile] = {profile.name: profile for profile in _CATALOG}


def list_profiles() -> Tuple[DataProfile, ...]:
    return _CATALOG


def lookup_profile(name: str) -> DataProfile:
    key = name.strip().lower()
    try:
        return DATA_PROFILES[key]
    except KeyError:
        raise UnknownProfile(
            f"Unknown data profile: {name!r}. Expected one of: {', '.join(DATA_PROFILES)}."
        ) from None


def apply_profile(shape: TransactionShape, name: str) -> TransactionShape:
    """Return ``shape`` with the profile's byte counts.

    The custom profile is a marker that leaves caller-entered counts alone.
    """

    profile = lookup_profile(name)
    if profile.name == CUSTOM_PROFILE:
        return shape
    return replace(shape, zero_bytes=profile.zero_bytes, non_zero_bytes=profile.non_zero_bytes)
