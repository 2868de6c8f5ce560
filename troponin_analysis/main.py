import matplotlib.pyplot as plt

from .charts import build_figure
from .data import describe_table, prepare_troponin

DATA_PATH = "troponin.csv"
OUTPUT_PATH = "troponin_charts.png"
SHOW_WINDOWS = True


def main(data_path=DATA_PATH, output_path=OUTPUT_PATH, show=SHOW_WINDOWS):
    troponin = prepare_troponin(data_path)
    describe_table(troponin)

    fig = build_figure(troponin)
    fig.savefig(output_path, dpi=150, bbox_inches="tight", facecolor=fig.get_facecolor())
    print(f"[SAVE] {output_path}")
    if show:
        plt.show()
    plt.close(fig)
    return output_path


if __name__ == "__main__":
    main()
