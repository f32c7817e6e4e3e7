import matplotlib.pyplot as plt

def show_or_save(filename=None):
    if filename is None:
        plt.show()
    else:
        plt.savefig(filename)
        plt.close()

def plot_sequence(seq, uniform, filename=None):
    """
    Plot a sequence above pseudo-random samples of the same length.
    """
    fig, ax = plt.subplots(2, 1)
    ax[0].plot(seq)
    ax[0].set_title("Halton")
    ax[1].plot(uniform)
    ax[1].set_title("Uniform")
    plt.tight_layout()
    show_or_save(filename)

def plot_points_2d(x, y, filename=None, labels=None):
    """
    Scatter points built by zipping two sequences, optionally annotated.
    """
    fig, ax = plt.subplots()
    ax.scatter(x, y, color="gray", marker=".")
    if labels is not None:
        for xi, yi, label in zip(x, y, labels):
            ax.annotate(label, (xi, yi))
    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1)
    ax.set_aspect("equal")
    show_or_save(filename)
