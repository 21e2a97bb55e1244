"""Demonstrations that share a stack or a queue between worker threads.

Each worker pushes a value, waits a little, then pops one value if the
container is not empty. When all workers are done the container should
be empty again.
"""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from tslibs.tsqueue import TSQueue
from tslibs.tsstack import TSStack

DEFAULT_THREADS = 10
DEFAULT_ITERATIONS = 1000


@dataclass(frozen=True)
class DemoResult:
    """What one demonstration run observed."""

    structure: str
    safe: bool
    num_threads: int
    iterations: int
    initial_size: int
    final_size: int

    @property
    def success(self) -> bool:
        return self.final_size == 0


@dataclass
class _Ops:
    push: Callable[[int], None]
    empty: Callable[[], bool]
    pop: Callable[[], None]
    size: Callable[[], int]


def _stack_ops(safe: bool) -> _Ops:
    if safe:
        stack: TSStack[int] = TSStack()
        return _Ops(stack.push, stack.empty, stack.pop, stack.size)
    items: list[int] = []
    return _Ops(items.append, lambda: not items, items.pop, lambda: len(items))


def _queue_ops(safe: bool) -> _Ops:
    if safe:
        queue: TSQueue[int] = TSQueue(factory=int)
        return _Ops(queue.emplace, queue.empty, queue.pop, queue.size)
    items: deque[int] = deque()
    return _Ops(items.append, lambda: not items, items.popleft, lambda: len(items))


def _run(
    structure: str,
    ops: _Ops,
    delay: Callable[[], None],
    num_threads: int,
    iterations: int,
    safe: bool,
) -> DemoResult:
    initial = ops.size()

    def task(thread_id: int) -> None:
        for i in range(iterations):
            ops.push(thread_id * 1000 + i)
            delay()
            if not ops.empty():
                ops.pop()

    threads = [threading.Thread(target=task, args=(n,)) for n in range(num_threads)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return DemoResult(structure, safe, num_threads, iterations, initial, ops.size())


def _random_sleep() -> None:
    time.sleep(random.randint(1, 1000) / 1_000_000)


def _yield() -> None:
    time.sleep(0)


def run_stack_demo(
    num_threads: int = DEFAULT_THREADS,
    iterations: int = DEFAULT_ITERATIONS,
    safe: bool = True,
) -> DemoResult:
    """Run the stack demonstration with a random short sleep per step."""
    return _run("stack", _stack_ops(safe), _random_sleep, num_threads, iterations, safe)


def run_queue_demo(
    num_threads: int = DEFAULT_THREADS,
    iterations: int = DEFAULT_ITERATIONS,
    safe: bool = True,
) -> DemoResult:
    """Run the queue demonstration with a brief yield per step."""
    return _run("queue", _queue_ops(safe), _yield, num_threads, iterations, safe)


def _report_stack(result: DemoResult) -> int:
    name = "TSStack" if result.safe else "Stack"
    label = "tsstack" if result.safe else "stack"
    print(f"Initial size of {label}: {result.initial_size}")
    print(f"Number of threads ran: {result.num_threads}")
    if result.success:
        print(f"Success: {name} is empty after all threads finished.")
        return 0
    print(f"Failure: {name} is not empty after all threads finished.", file=sys.stderr)
    print(f"Size of {label} now: {result.final_size}")
    return 1


def _report_queue(result: DemoResult) -> int:
    label = "tsqueue" if result.safe else "queue"
    print(f"Initial queue size: {result.initial_size}")
    print(f"Final queue size: {result.final_size}")
    if result.success:
        print(f"Success: {label} size is zero after all operations.")
        return 0
    print(
        f"Failed: {label} size is expected to be zero. Actual {result.final_size}.",
        file=sys.stderr,
    )
    return 1


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one demonstration from the command line and return its exit code."""
    parser = argparse.ArgumentParser(
        prog="tslibs-demo",
        description="Share a stack or queue between threads and check it drains.",
    )
    parser.add_argument("structure", choices=("stack", "queue"))
    parser.add_argument(
        "--unsafe",
        action="store_true",
        help="use a plain container without a lock",
    )
    parser.add_argument("--threads", type=_non_negative, default=DEFAULT_THREADS)
    parser.add_argument("--iterations", type=_non_negative, default=DEFAULT_ITERATIONS)
    args = parser.parse_args(argv)

    safe = not args.unsafe
    if args.structure == "stack":
        return _report_stack(run_stack_demo(args.threads, args.iterations, safe))
    return _report_queue(run_queue_demo(args.threads, args.iterations, safe))


if __name__ == "__main__":
    sys.exit(main())