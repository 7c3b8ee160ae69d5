import cProfile

from lineq import *
from lineq.debug.logger import Logger
from lineq.simplify import Simplifier

logger = Logger()
Simplifier.logger = logger


# ALl are taken from tests.
BENCHMARKING_SUITE = [
    "x = 5",
    "2x + 3x - 2 = x + y + 2",
    "-2x -6x -3y = -5 -x -y -10",
    "3*(x + 2y - 5) = -4*(-8y + 10x + 2)",
    "(24x + 12y + 6)/3 = 0",
    "x(1 + 18) = (3 + 6)(2 + 9x)",
    "(1 + 6) (x + 9) (2 - 3 + 4) = 5y",
    "(x + 1)(1 + 2 + 3)(4 + 5 + 6 + 7)(8 + 9) = 3y / (2 + 4)",
    "(a + b + c + d)(1 + 2)(3 + 4)(5 + 6)(7 + 8) = e",
]


# Create a Profile object
profiler = cProfile.Profile()

# Start profiling
profiler.enable()

### CODE IN BETWEEN THESE LINES IS PROFILED ###

for equation in BENCHMARKING_SUITE:
    simplify_equation(equation)


### CODE IN BETWEEN THESE LINES IS PROFILED ###


profiler.disable()


logger.dump()
logger.plot()

# Print stats sorted by cumulative time
profiler.print_stats(sort="cumtime")
