"""See benchmark/benchmark-profiler.py for an example usage of the logger.

```
import lineq
from lineq.debug.logger import Logger
from lineq.simplify import Simplifier

logger = Logger()
Simplifier.logger = logger

# simplify some equations as normal...
lineq.simplify_equation("3*(x + 2y - 5) = -4*(-8y + 10x + 2)")

logger.dump()   # dumps information into simplify_log.txt
logger.plot()   # creates a bar chart of simplification speeds in simplify_log.png
```

Setting a class attribute affects every Simplifier in the process, so remember to set it back to None.
"""

from typing import Dict, NamedTuple, Optional

from ..equation import CanonicalEquation


class Datum(NamedTuple):
    source: str
    time_spent: float
    result: Optional[CanonicalEquation]  # None if simplifying raised


class Logger:
    """Keeps track of time spent on each equation."""

    _data: Dict[str, Datum] = None

    def __init__(self, path: str = "simplify_log"):
        self._data = {}
        self._path = path

    def log(self, source: str, time_spent: float, result: Optional[CanonicalEquation]):
        """Log a simplification entry.

        source: the equation text
        time_spent: time taken to simplify it, in seconds
        result: the canonical equation, or None if it failed
        """
        self._data[source] = Datum(source, time_spent, result)

    @property
    def data(self) -> Dict[str, Datum]:
        return self._data

    def sort(self):
        """sorts the data by time spent on each equation, from most time to least time."""
        self._data = dict(sorted(self._data.items(), key=lambda x: x[1].time_spent, reverse=True))

    def dump(self):
        self.sort()

        with open(self._path + ".txt", "w") as f:
            f.write("Equation: time taken (s)")
            f.write("\n\n")
            for k, v in self._data.items():
                outcome = "FAILED" if v.result is None else str(v.result)
                f.write(f"{k}: {v.time_spent} -> {outcome}\n")

    def plot(self):
        import matplotlib.pyplot as plt

        self.sort()
        x = list(self._data.keys())
        y = [v.time_spent for v in self._data.values()]
        plt.bar(x, y)
        plt.ylabel("Time taken to simplify (s)")
        plt.xticks(rotation=90)  # rotate labels vertically
        plt.tight_layout()  # automatically adjust spacing (needed to show the entirety of the vertical labels)
        plt.savefig(self._path + ".png")
