"""
ContentHash value object for source text fingerprints.

Stored on every generation for traceability and metrics. It is not
reversible and nothing enforces uniqueness on it.
"""

import hashlib
from dataclasses import dataclass
from typing import Self

from ..exceptions import ValidationError

_CONTENT_HASH_LENGTH = 64


@dataclass(frozen=True)
class ContentHash:
    """SHA-256 hex digest of a piece of text."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != _CONTENT_HASH_LENGTH:
            raise ValidationError(
                "ContentHash must be 64 character hex string (SHA-256)", field="content_hash"
            )
        try:
            int(self.value, 16)
        except ValueError as err:
            raise ValidationError(
                "ContentHash must be valid hexadecimal string", field="content_hash"
            ) from err

    @classmethod
    def compute(cls, content: str) -> Self:
        """
        Fingerprint text content.

        Args:
            content: Text to hash, encoded as UTF-8

        Returns:
            ContentHash instance with computed hash
        """
        if not content:
            raise ValidationError("Cannot compute hash of empty content", field="content")

        return cls(hashlib.sha256(content.encode("utf-8")).hexdigest())

    @property
    def short(self) -> str:
        """First 12 hex characters, enough to correlate log lines."""
        return self.value[:12]

    def __str__(self) -> str:
        return self.value
