"""
Compare the uniformity of Halton sequences against pseudo-random samples.
"""
import argparse
import itertools
import jax
import numpy as np
import pandas as pd
import halton
import metrics

def metric_row(generator, base, samples):
    return {
        "generator": generator,
        "base": base,
        "samples": samples.size,
        "star_discrepancy": metrics.star_discrepancy(samples),
        "mean_error": metrics.mean_error(samples),
        "var_error": metrics.var_error(samples),
    }

def discrepancy_table(bases, sizes, seed=48279, verbose=True):
    rng = jax.random.PRNGKey(seed)
    rows = []
    for size in sizes:
        rng, key = jax.random.split(rng)
        uniform = np.asarray(jax.random.uniform(key, (size,)))
        rows.append(metric_row("uniform", 0, uniform))
    for base, size in itertools.product(bases, sizes):
        if verbose:
            print("Base {}, {} samples".format(base, size))
        rows.append(metric_row("halton", base, halton.halton_sequence(size, base)))
    return pd.DataFrame(rows)

if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("output", type=str)
    parser.add_argument("--bases", type=int, nargs="+", default=[2, 3, 5, 7])
    parser.add_argument("--sizes", type=int, nargs="+", default=[10, 100, 1000, 10000, 100000])
    parser.add_argument("--seed", type=int, default=48279)
    args = parser.parse_args()

    df = discrepancy_table(args.bases, args.sizes, args.seed)
    df.to_csv(args.output, header=True, index=False)
