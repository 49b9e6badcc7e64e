import matplotlib.pyplot as plt
import pandas as pd
from pandas.api.types import is_bool_dtype, is_numeric_dtype


def steps_to_frame(steps):
    """Build a DataFrame indexed by "index" with columns element and accumulator."""
    df = pd.DataFrame.from_records(
        [(s.index, s.element, s.accumulator) for s in steps],
        columns=["index", "element", "accumulator"],
    )
    return df.set_index("index")


class CsvReport:
    """Configure the output of a DataFrame csv format.
    """

    def __init__(self, df, file=None, **kwargs):
        """Prepare a CSV report format file.

        This is no more than a convenience wrapper to Pandas DataFrame API.

        Arguments:
        df - DataFrame (required)
        file - Write to given file path or open file buffer. Returns a string when None.
        """
        self._df = df
        self._file = file

    def export(self):
        return self._df.to_csv(self._file)


class PlotReport:
    """Configure the output of the accumulator of a fold to plot image (.png).
    """

    def __init__(self, df, file=None, title="Fold", **kwargs):
        """Prepare a plot file.

        Arguments:
        df - DataFrame from steps_to_frame (required)
        file - Write to given file path or open file buffer.
        title - Extra title, typically the operator name

        raises:
        ValueError - when the accumulator is not numeric
        """
        accumulator = df["accumulator"].infer_objects()
        if df.empty or is_bool_dtype(accumulator) or not is_numeric_dtype(accumulator):
            raise ValueError("Only numeric accumulators can be plotted")

        self._series = accumulator
        self._file = file
        self.title = " ".join([title, str(df.index[0]), str(df.index[-1])])

    def export(self):
        plt.close("all")

        ax = self._series.plot.line(title=self.title, ylabel="Accumulator", xlabel="Index", marker="o")
        fig = ax.get_figure()
        fig.savefig(self._file)
