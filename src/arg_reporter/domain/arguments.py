"""Invocation arguments as an immutable value object.

Purpose
-------
Give the reporter a pure input: an ordered, read-only snapshot of the tokens
the host runtime handed to the process at start-up.

Contents
--------
* :class:`InvocationArguments` dataclass with accessors for the invocation
  name and the user-supplied tokens.

System Role
-----------
Lives in the domain layer. Acquisition from ``sys.argv`` happens at the edge
(:func:`arg_reporter.arg_reporter.current_arguments`) so this module never
touches process-global state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(slots=True, frozen=True)
class InvocationArguments:
    """Ordered tokens supplied by the host runtime.

    Attributes
    ----------
    tokens:
        Element ``0`` is the path or name used to invoke the program; the
        remaining elements are user tokens in command-line order.

    Examples
    --------
    >>> args = InvocationArguments.of("prog", "foo", "bar")
    >>> args.invocation_name, args.user_tokens
    ('prog', ('foo', 'bar'))
    >>> len(args)
    3
    """

    tokens: tuple[str, ...]

    def __post_init__(self) -> None:
        tokens = tuple(self.tokens)
        if not tokens:
            raise ValueError("invocation arguments must include the invocation name")
        for position, token in enumerate(tokens):
            if not isinstance(token, str):
                raise TypeError(f"argument {position} must be str, got {type(token).__name__}")
        object.__setattr__(self, "tokens", tokens)

    @classmethod
    def of(cls, invocation_name: str, *user_tokens: str) -> "InvocationArguments":
        """Build arguments from an invocation name followed by user tokens."""

        return cls((invocation_name, *user_tokens))

    @classmethod
    def from_sequence(cls, argv: Iterable[str]) -> "InvocationArguments":
        """Snapshot ``argv`` (``sys.argv`` shaped) into an immutable instance.

        The caller's sequence is copied, so later mutation of ``argv`` does not
        leak into the snapshot.

        Examples
        --------
        >>> argv = ["prog", "x"]
        >>> args = InvocationArguments.from_sequence(argv)
        >>> argv.append("y")
        >>> args.tokens
        ('prog', 'x')
        """

        return cls(tuple(argv))

    @property
    def invocation_name(self) -> str:
        """Return element ``0``, the name used to invoke the program."""

        return self.tokens[0]

    @property
    def user_tokens(self) -> tuple[str, ...]:
        """Return the tokens after the invocation name."""

        return self.tokens[1:]

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __getitem__(self, index: int) -> str:
        return self.tokens[index]


__all__ = ["InvocationArguments"]
