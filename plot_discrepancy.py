import argparse
import matplotlib.pyplot as plt
import seaborn as sns
import pandas as pd

column_name_replacements = {
    "star_discrepancy": "Star Discrepancy",
    "mean_error": "Mean Error",
    "var_error": "Variance Error",
}

def label(row):
    if row["generator"] == "halton":
        return "Halton, base {}".format(row["base"])
    return "Uniform"

def plot_metric(y, df, ax, legend=True):
    sns.lineplot(x="samples", y=y, data=df, hue="Generator", marker="o", ax=ax)
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_ylabel(column_name_replacements[y])
    ax.set_xlabel("Samples")
    if legend:
        ax.legend(bbox_to_anchor=(1.01, 1), loc="upper left")
    else:
        ax.get_legend().remove()

def plot_table(df, output):
    df = df.assign(Generator=df.apply(label, axis=1))
    fig, axes = plt.subplots(1, 3, figsize=(14, 3.5))
    for i, y in enumerate(column_name_replacements):
        plot_metric(y, df, axes[i], i == 2)
    plt.tight_layout()
    plt.savefig(output)
    plt.close()

if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("input")
    parser.add_argument("output")
    args = parser.parse_args()

    plot_table(pd.read_csv(args.input), args.output)
