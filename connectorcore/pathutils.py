"""Path string helpers."""

from __future__ import annotations

import os
from typing import Iterable, Union

PathPart = Union[str, "os.PathLike[str]"]


def path_join(parts: Iterable[PathPart]) -> str:
    """Join ``parts`` with the platform path separator.

    Every part is kept as given, with exactly one separator between
    neighbours. At least one part is required.
    """
    strings = [os.fspath(part) for part in parts]
    if not strings:
        raise ValueError("at least one path part is required")
    return os.sep.join(strings)