import matplotlib.pyplot as plt
from matplotlib.figure import Figure


def plot_accuracy_history(
    history: list[float],
    target_accuracy: float | None = None,
    figsize: tuple[int, int] = (10, 6),
) -> Figure:
    """
    Plot the running accuracy reported after every training example.

    Args:
        history: Accuracy values in the order they were reported.
        target_accuracy: If given, drawn as a dashed horizontal line.
        figsize: Figure size tuple.

    Returns:
        The figure. The caller decides whether to show or save it.
    """
    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(range(1, len(history) + 1), history, linewidth=1, label="running accuracy")

    if target_accuracy is not None:
        ax.axhline(target_accuracy, color="red", linestyle="--", label="target")

    ax.set_xlabel("Example", fontsize=12)
    ax.set_ylabel("Accuracy", fontsize=12)
    ax.set_title("Training Accuracy", fontsize=14)
    ax.legend()

    return fig
