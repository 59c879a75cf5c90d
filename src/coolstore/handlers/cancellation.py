"""Cooperative cancellation signal threaded from caller to command handler."""

from __future__ import annotations

import asyncio


class CancellationToken:
    """Cancellation flag shared by one caller and the handlers it invokes.

    The token is passed through every layer unmodified.  Only the innermost
    handler decides whether to consult it; cancelling never interrupts a
    handler that does not check.
    """

    __slots__ = ("_cancelled",)

    def __init__(self) -> None:
        self._cancelled = False

    @staticmethod
    def none() -> CancellationToken:
        """Return the shared token that can never be cancelled."""
        return _NONE

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def raise_if_cancelled(self) -> None:
        """Raise :class:`asyncio.CancelledError` if :meth:`cancel` was called."""
        if self._cancelled:
            raise asyncio.CancelledError("operation cancelled")

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self._cancelled})"


class _NeverCancelled(CancellationToken):
    __slots__ = ()

    def cancel(self) -> None:
        pass

    def __repr__(self) -> str:
        return "CancellationToken.none()"


_NONE = _NeverCancelled()
