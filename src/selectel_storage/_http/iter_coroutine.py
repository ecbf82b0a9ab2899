"""Drive coroutines that never suspend from blocking code."""

from __future__ import annotations

import typing

_T = typing.TypeVar("_T")


def iter_coroutine(coro: typing.Coroutine[None, None, _T]) -> _T:
    """
    Execute a coroutine that completes in a single iteration.

    Blocking clients share their business logic with the async clients by
    running it over a transport whose coroutines never await anything, so
    a single ``send(None)`` runs them to completion.

    Raises:
        RuntimeError: If the coroutine doesn't complete in one iteration.
    """
    try:
        coro.send(None)
    except StopIteration as ex:
        return ex.value  # type: ignore [no-any-return]
    else:
        raise RuntimeError(f"coroutine {coro!r} did not stop after one iteration!")
    finally:
        coro.close()


__all__ = ["iter_coroutine"]
