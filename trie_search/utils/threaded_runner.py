# threaded_runner.py - run callables on a small thread pool and collect their results.

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List


def run_parallel(tasks: Iterable[Callable], max_workers: int = 4) -> List:
    """
    Run zero-argument callables in a thread pool.
    Results come back in submission order; the first exception raised by a
    task is re-raised here.
    """
    with ThreadPoolExecutor(max_workers=max_workers) as ex:
        futs = [ex.submit(t) for t in tasks]
        return [f.result() for f in futs]
