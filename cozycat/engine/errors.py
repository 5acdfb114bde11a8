"""Engine errors — every failure leaves the garden untouched."""

from __future__ import annotations


class CozyCatError(Exception):
    """Base class for all progression engine errors."""


class InvalidArgument(CozyCatError, ValueError):
    """A caller passed something the engine never produces itself."""


class UnknownUpgrade(InvalidArgument, KeyError):
    """Upgrade id is not in the catalog."""

    def __init__(self, upgrade_id: str) -> None:
        super().__init__(f"unknown upgrade: {upgrade_id!r}")
        self.upgrade_id = upgrade_id

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class InsufficientFunds(CozyCatError):
    """Not enough pets for the next level of an upgrade."""

    def __init__(self, upgrade_id: str, cost: float, available: float) -> None:
        super().__init__(
            f"{upgrade_id} costs {cost:g} pets, only {available:g} available"
        )
        self.upgrade_id = upgrade_id
        self.cost = cost
        self.available = available


class NoGainAvailable(CozyCatError):
    """Rebirth requested but it would grant zero hearts."""
