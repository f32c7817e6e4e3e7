"""
Timing benchmarks for the one-shot function and the iterator.
"""
import argparse
import itertools
import timeit
import pandas as pd
import halton

def bench_number(base, count):
    res = 0.0
    for i in range(count):
        res = halton.number(base, i)
    return res

def bench_sequence(base, count):
    res = 0.0
    for value in itertools.islice(halton.Sequence(base), count):
        res = value
    return res

def bench_batch(base, count):
    return halton.halton_sequence(count, base)[-1]

benchmarks = {
    "number": bench_number,
    "sequence": bench_sequence,
    "batch": bench_batch,
}

def run_benchmarks(bases, count, repeats=3, verbose=True):
    rows = []
    for name, base in itertools.product(benchmarks, bases):
        fun = benchmarks[name]
        if name == "batch":
            # compile outside of the timed region
            fun(base, 1)
        seconds = min(timeit.repeat(lambda: fun(base, count), number=1, repeat=repeats))
        if verbose:
            print("Benchmark: {} base {}: {:.4f}s".format(name, base, seconds))
        rows.append({"benchmark": name, "base": base, "count": count, "seconds": seconds})
    return pd.DataFrame(rows)

if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("output", type=str)
    parser.add_argument("--count", type=int, default=1000000)
    parser.add_argument("--repeats", type=int, default=3)
    parser.add_argument("--bases", type=int, nargs="+", default=[2, 17])
    args = parser.parse_args()

    df = run_benchmarks(args.bases, args.count, args.repeats)
    df.to_csv(args.output, header=True, index=False)
