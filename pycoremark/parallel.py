"""Running several benchmark contexts side by side, and platform settings."""

from __future__ import annotations

import platform
import threading
from dataclasses import dataclass
from typing import Callable, Sequence, TypeVar

from .crc import parse_value

T = TypeVar("T")

_U32 = 0xFFFFFFFF


@dataclass(frozen=True)
class PlatformConfig:
    """Settings describing how the benchmark is hosted and reported."""

    multithread: int = 2
    parallel_method: str = "PThreads"
    has_float: bool = True
    compiler_version: str = f"{platform.python_implementation()} {platform.python_version()}"
    compiler_flags: str = ""
    mem_location: str = (
        "Please put data memory location here\n\t\t\t"
        "(e.g. code in flash, data on heap etc)"
    )
    mem_location_unspec: bool = True

    def __post_init__(self) -> None:
        if self.multithread < 1:
            raise ValueError(
                f"at least one context is required, got {self.multithread}"
            )


def split_context_arg(argv: Sequence[str], max_contexts: int) -> tuple[int, list[str]]:
    """Take a leading ``M<n>`` argument that sets the number of contexts.

    ``argv`` holds the arguments without the program name.  When its first
    entry starts with ``M`` the rest of that entry is parsed as the context
    count, capped at ``max_contexts``, and the entry is dropped from the
    returned arguments.  Otherwise the count is ``max_contexts`` and the
    arguments come back unchanged.
    """
    args = list(argv)
    if not args or not args[0].startswith("M"):
        return max_contexts, args
    # The count is held unsigned, so a negative value caps at the maximum.
    requested = parse_value(args[0][1:]) & _U32
    return min(requested, max_contexts), args[1:]


def run_parallel(results: Sequence[T], work: Callable[[T], object]) -> list[T]:
    """Run ``work`` on every context in its own thread and wait for all of them.

    Returns the contexts in their original order.  If any worker raised, the
    first such error (by context order) is raised once every thread is done.
    """
    errors: list[BaseException | None] = [None] * len(results)

    def runner(position: int, context: T) -> None:
        try:
            work(context)
        except BaseException as exc:  # re-raised in the calling thread
            errors[position] = exc

    threads = [
        threading.Thread(target=runner, args=(position, context), daemon=True)
        for position, context in enumerate(results)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    for error in errors:
        if error is not None:
            raise error
    return list(results)