"""Joining of adjacent string pieces."""

__all__ = ["concat"]


def concat(*args: str) -> str:
    """Join the given strings together, in order.

    Every argument must be a string.
    """
    for arg in args:
        if not isinstance(arg, str):
            raise TypeError(
                f"expected a string, got {type(arg).__name__}: {arg!r}"
            )
    return "".join(args)