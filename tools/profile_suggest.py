# tools/profile_suggest.py
"""
Small profiling harness for Trie.suggest and Trie.search_ranked.
Usage:
  python tools/profile_suggest.py --words 5000 --iters 500 --threads 4

Prints mean/median/std latency per operation. With --threads > 1 the calls
run concurrently against a thread-safe trie.
"""
import argparse
import random
import statistics
import string
import time

from trie_search.core.trie import Trie
from trie_search.utils.logger_utils import Log
from trie_search.utils.threaded_runner import run_parallel


def random_words(n, rng, min_len=3, max_len=10):
    letters = string.ascii_lowercase[:12]  # small alphabet -> shared prefixes
    return ["".join(rng.choice(letters) for _ in range(rng.randint(min_len, max_len))) for _ in range(n)]


def timed_calls(fn, queries):
    out = []
    for q in queries:
        t0 = time.perf_counter()
        fn(q)
        out.append((time.perf_counter() - t0) * 1000.0)  # ms
    return out


def report(name, latencies):
    print("%-14s mean=%.3f median=%.3f stdev=%.3f min=%.3f max=%.3f (ms, n=%d)" % (
        name,
        statistics.mean(latencies),
        statistics.median(latencies),
        statistics.pstdev(latencies),
        min(latencies),
        max(latencies),
        len(latencies),
    ))


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--words", type=int, default=5000, help="vocabulary size")
    parser.add_argument("--iters", type=int, default=200, help="measured calls per operation")
    parser.add_argument("--threads", type=int, default=1, help="concurrent callers")
    parser.add_argument("--seed", type=int, default=7)
    parser.add_argument("--log", default=None, help="log file for timing metrics")
    args = parser.parse_args()

    rng = random.Random(args.seed)
    log = Log(args.log)
    trie = Trie(thread_safe=args.threads > 1)
    vocab = random_words(args.words, rng)
    with log.time_block(f"insert {len(vocab)} words"):
        trie.insert_many(vocab)

    prefixes = [w[:2] for w in rng.sample(vocab, min(args.iters, len(vocab)))]
    queries = random_words(args.iters, rng)

    def suggest(p):
        return trie.suggest(p, 10)

    def ranked(q):
        return trie.search_ranked(q, 10)

    if args.threads > 1:
        chunks = [prefixes[i::args.threads] for i in range(args.threads)]
        qchunks = [queries[i::args.threads] for i in range(args.threads)]
        sug = run_parallel([lambda c=c: timed_calls(suggest, c) for c in chunks], args.threads)
        rank = run_parallel([lambda c=c: timed_calls(ranked, c) for c in qchunks], args.threads)
        report("suggest", [x for part in sug for x in part])
        report("search_ranked", [x for part in rank for x in part])
    else:
        report("suggest", timed_calls(suggest, prefixes))
        report("search_ranked", timed_calls(ranked, queries))

    print("Sample suggest output:", suggest(prefixes[0]))
    print("Sample ranked output:", ranked(queries[0]))


if __name__ == "__main__":
    main()
