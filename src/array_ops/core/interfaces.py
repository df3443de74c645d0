"""
Protocol interfaces for the capabilities a container supplies.

Defines contracts for: HasLength, Readable, Writable
Any object satisfying these can be handed to the algorithm suite.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HasLength(Protocol):
    """
    Length capability.

    Must report a non-negative element count that stays constant between
    mutating operations.
    """

    def __len__(self) -> int:
        ...


@runtime_checkable
class Readable(HasLength, Protocol):
    """
    Indexed read capability.

    ``self[i]`` must be valid for every ``0 <= i < len(self)`` and must fail
    loudly (``IndexError`` or a subclass) for any other position.
    """

    def __getitem__(self, index: int) -> Any:
        ...


@runtime_checkable
class Writable(Readable, Protocol):
    """
    Indexed write capability.

    Same bounds contract as ``Readable``. Containers that cannot be mutated
    simply do not implement ``__setitem__``.
    """

    def __setitem__(self, index: int, value: Any) -> None:
        ...
