"""Thread exercises: joining workers, a shared counter and two senders on a channel."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from queue import SimpleQueue

_DONE = object()


def spawn_and_join(count: int = 10, delay: float = 0.25) -> int:
    """Start `count` threads that sleep, wait for all of them and return how many finished."""
    if count < 0:
        raise ValueError("count must not be negative")

    def work(index: int) -> None:
        time.sleep(delay)
        print(f"thread {index} is complete")

    handles = [threading.Thread(target=work, args=(index,)) for index in range(count)]
    for handle in handles:
        handle.start()
    completed = 0
    for handle in handles:
        handle.join()
        completed += 1
    if completed != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    return completed


@dataclass
class JobStatus:
    """A counter of completed jobs, guarded by a lock."""

    jobs_completed: int = 0
    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )


def run_jobs(count: int = 10, delay: float = 0.25) -> JobStatus:
    """Run `count` threads that each count one completed job in a shared status."""
    if count < 0:
        raise ValueError("count must not be negative")
    status = JobStatus()

    def work() -> None:
        time.sleep(delay)
        with status.lock:
            status.jobs_completed += 1

    handles = [threading.Thread(target=work) for _ in range(count)]
    for handle in handles:
        handle.start()
    for handle in handles:
        handle.join()
        with status.lock:
            completed = status.jobs_completed
        print(f"jobs completed {completed}")
    return status


@dataclass
class Queue:
    """Ten numbers split into two halves."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


def send_tx(queue: Queue, channel: SimpleQueue, delay: float = 1.0) -> list[threading.Thread]:
    """Send both halves of the queue on the channel from two threads.

    Each sender puts an end marker on the channel when it has sent its half.
    """

    def send(values: list[int]) -> None:
        for value in values:
            print(f"sending {value!r}")
            channel.put(value)
            time.sleep(delay)
        channel.put(_DONE)

    senders = [
        threading.Thread(target=send, args=(half,), daemon=True)
        for half in (queue.first_half, queue.second_half)
    ]
    for sender in senders:
        sender.start()
    return senders


def receive_all(queue: Queue, delay: float = 1.0) -> list[int]:
    """Receive every value sent from the queue, in arrival order."""
    channel: SimpleQueue = SimpleQueue()
    senders = send_tx(queue, channel, delay)
    received: list[int] = []
    finished = 0
    while finished < len(senders):
        item = channel.get()
        if item is _DONE:
            finished += 1
            continue
        print(f"Got: {item}")
        received.append(item)
    for sender in senders:
        sender.join()
    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(
            f"received {len(received)} numbers, expected {queue.length}"
        )
    return received