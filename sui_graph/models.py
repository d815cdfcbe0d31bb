"""Data models — all frozen (immutable)."""
from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidArgument

SUI_ADDRESS_LENGTH = 32

_HEX_RE = re.compile(r"^[0-9a-fA-F]{1,64}$")


@dataclass(frozen=True)
class SuiAddress:
    """32-byte identifier shared by objects and owners."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != SUI_ADDRESS_LENGTH:
            raise InvalidArgument(
                f"Address must be {SUI_ADDRESS_LENGTH} bytes, got {len(self.value)}"
            )

    @classmethod
    def from_str(cls, text: str) -> SuiAddress:
        """Parse ``0x``-prefixed or bare hex, left-padding short forms like ``0x2``."""
        digits = text[2:] if text.startswith(("0x", "0X")) else text
        if not _HEX_RE.match(digits):
            raise InvalidArgument(f"Invalid Sui address: {text!r}")
        return cls(bytes.fromhex(digits.rjust(SUI_ADDRESS_LENGTH * 2, "0")))

    def __str__(self) -> str:
        return "0x" + self.value.hex()


@dataclass(frozen=True)
class Base64:
    """Opaque binary payload, rendered as standard base64 text."""

    value: bytes

    @classmethod
    def from_str(cls, text: str) -> Base64:
        try:
            return cls(base64.b64decode(text, validate=True))
        except binascii.Error as e:
            raise InvalidArgument(f"Invalid base64 payload: {e}") from e

    def __str__(self) -> str:
        return base64.b64encode(self.value).decode("ascii")


class ObjectKind(Enum):
    OWNED = "OWNED"
    CHILD = "CHILD"
    SHARED = "SHARED"
    IMMUTABLE = "IMMUTABLE"


@dataclass(frozen=True)
class ObjectKey:
    """A specific historical version of an object."""

    object_id: SuiAddress
    version: int


@dataclass(frozen=True)
class ObjectFilter:
    """Conjunction of optional predicates narrowing an object query.

    ``object_ids`` / ``object_keys`` form the candidate set; the remaining
    predicates refine it. An empty filter matches everything reachable.
    """

    package: SuiAddress | None = None
    module: str | None = None
    ty: str | None = None
    owner: SuiAddress | None = None
    object_ids: tuple[SuiAddress, ...] | None = None
    object_keys: tuple[ObjectKey, ...] | None = None

    def is_empty(self) -> bool:
        return all(
            v is None
            for v in (
                self.package,
                self.module,
                self.ty,
                self.owner,
                self.object_ids,
                self.object_keys,
            )
        )


@dataclass(frozen=True)
class TransactionBlock:
    """Transaction record resolved from a digest."""

    digest: str
    sender: SuiAddress | None = None
    checkpoint: int | None = None
    timestamp_ms: int | None = None


@dataclass(frozen=True)
class Balance:
    """Aggregate balance of one coin type for an owner."""

    coin_type: str
    coin_object_count: int
    total_balance: int
