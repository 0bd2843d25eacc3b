"""Exceptions raised by the pincode services."""

from __future__ import annotations

from typing import Sequence


class InvalidPincodeError(ValueError):
    """Raised when an operation that cannot degrade gracefully receives a bad pincode."""

    def __init__(self, pincodes: Sequence[str], errors: Sequence[str]) -> None:
        self.pincodes = tuple(pincodes)
        self.errors = tuple(errors)
        details = "; ".join(f"{pin!r}: {err}" for pin, err in zip(self.pincodes, self.errors))
        super().__init__(f"Invalid pincode(s): {details}" if details else "Invalid pincode(s)")
