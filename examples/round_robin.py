"""
Round-robin CPU scheduling with a rotating ready queue.

Demonstrates:
- SimPy process driving simulated time slices
- rotate_queue_left sending an unfinished job to the back of the ready queue
- Jobs leaving the queue once their burst is used up

With bursts A=5, B=3, C=1 and quantum 2 the jobs complete as
C at 5, B at 8, A at 9.
"""

from __future__ import annotations

from collections import deque
from typing import Generator

import simpy

from pytoolbox import rotate_queue_left


class Job:
    """CPU job with a remaining burst time."""

    def __init__(self, name: str, burst: float) -> None:
        self.name = name
        self.remaining = burst


def cpu(
    env: simpy.Environment,
    ready: deque[Job],
    quantum: float,
    completions: dict[str, float],
) -> Generator[simpy.Event, None, None]:
    """Serve the front job for one quantum, then rotate or retire it."""
    while ready:
        job = ready[0]
        time_slice = min(quantum, job.remaining)
        yield env.timeout(time_slice)
        job.remaining -= time_slice

        if job.remaining <= 0:
            ready.popleft()
            completions[job.name] = env.now
        else:
            rotate_queue_left(ready, 1)


def run(
    bursts: list[tuple[str, float]] | None = None, quantum: float = 2
) -> dict[str, float]:
    """Run the scheduler and return completion times in completion order."""
    if bursts is None:
        bursts = [("A", 5), ("B", 3), ("C", 1)]

    env = simpy.Environment()
    ready = deque(Job(name, burst) for name, burst in bursts)
    completions: dict[str, float] = {}

    env.process(cpu(env, ready, quantum, completions))
    env.run()
    return completions


def main() -> None:
    completions = run()
    for name, finished_at in completions.items():
        print(f"Job {name} completed at {finished_at}")


if __name__ == "__main__":
    main()
