from pathlib import Path
from typing import List

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import matplotlib.dates as mdates
from matplotlib.dates import date2num
from matplotlib import ticker

from core.models import ScheduleStatus, ScheduleTask


class ScheduleGanttRenderer:
    def render(self, tasks: List[ScheduleTask], output_path: Path) -> Path:
        if not tasks:
            raise ValueError("No tasks available for Gantt chart")

        names = [t.description for t in tasks]
        start_nums = [date2num(t.start_date) for t in tasks]
        durations = [max(1, (t.end_date - t.start_date).days) for t in tasks]
        delayed = [t.status == ScheduleStatus.DELAYED for t in tasks]
        done = [t.status == ScheduleStatus.DONE for t in tasks]

        fig, ax = plt.subplots(figsize=(10, max(2.5, 0.4 * len(tasks) + 1)))

        for i, (s, d, late, finished) in enumerate(zip(start_nums, durations, delayed, done)):
            color = "#ff9999" if late else ("#99cc99" if finished else "#d0d0ff")
            ax.barh(i, d, left=s, height=0.4, color=color, edgecolor="black", linewidth=0.6)

        ax.set_yticks(range(len(names)))
        ax.set_yticklabels(names, fontsize=8)
        ax.invert_yaxis()

        locator = mdates.AutoDateLocator(minticks=4, maxticks=10)
        ax.xaxis.set_major_locator(locator)
        ax.xaxis.set_major_formatter(mdates.ConciseDateFormatter(locator))
        ax.xaxis.set_minor_locator(ticker.NullLocator())

        ax.set_title("Cronograma de Execução")
        ax.grid(True, axis="x", linestyle=":", linewidth=0.5)

        fig.tight_layout()
        fig.savefig(output_path, dpi=150)
        plt.close(fig)

        return output_path
