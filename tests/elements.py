"""Shared element types for singlylinkedlist tests."""

from __future__ import annotations


class DeletionCounter:
    """Counts finalized DeletionSpy instances."""

    def __init__(self) -> None:
        self.count = 0


class DeletionSpy:
    """Element that bumps its counter (if set) when finalized."""

    def __init__(self, counter: DeletionCounter | None = None) -> None:
        self.counter = counter

    def __del__(self) -> None:
        if self.counter is not None:
            self.counter.count += 1


class Countdown:
    """Number of copies allowed before ThrowOnCopy starts failing."""

    def __init__(self, remaining: int) -> None:
        self.remaining = remaining


class ThrowOnCopy:
    """Element whose copy raises MemoryError once its countdown reaches zero."""

    def __init__(self, countdown: Countdown | None = None) -> None:
        self.countdown = countdown

    def __copy__(self) -> ThrowOnCopy:
        if self.countdown is not None:
            if self.countdown.remaining == 0:
                raise MemoryError("copy failed")
            self.countdown.remaining -= 1
        return ThrowOnCopy(self.countdown)


class SpyOnCopy:
    """Element whose copies are DeletionSpy instances reporting to counter.

    Copying raises MemoryError once countdown reaches zero.
    """

    def __init__(self, countdown: Countdown, counter: DeletionCounter) -> None:
        self.countdown = countdown
        self.counter = counter

    def __copy__(self) -> DeletionSpy:
        if self.countdown.remaining == 0:
            raise MemoryError("copy failed")
        self.countdown.remaining -= 1
        return DeletionSpy(self.counter)
