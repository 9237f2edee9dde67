"""Small pure helpers shared by the endpoint layer."""

from collections.abc import Mapping, Sequence
from typing import Any


def pick(args: Mapping[str, Any], keys: Sequence[str]) -> dict[str, Any]:
    """Return the entries of `args` named in `keys` that carry a value.

    A key counts as absent when it is missing from `args` or maps to None.
    The result follows the order of `keys`.

    Args:
        args: The flat call arguments.
        keys: The key names to keep.

    Returns:
        dict[str, Any]: A new mapping restricted to present keys.
    """
    return {key: args[key] for key in keys if args.get(key) is not None}
