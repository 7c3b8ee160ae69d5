import statistics
import time

import lineq

# ALl are taken from tests.
BENCHMARKING_SUITE = [
    "x = 5",
    "2x + 3x - 2 = x + y + 2",
    "-2x -6x -3y = -5 -x -y -10",
    "3*(x + 2y - 5) = -4*(-8y + 10x + 2)",
    "(24x + 12y + 6)/3 = 0",
    "x(1 + 18) = (3 + 6)(2 + 9x)",
    "2^(1 + 3 + 1) * x = 3^(2 + 1)",
    "(1 + 6) (x + 9) (2 - 3 + 4) = 5y",
    "(x + 1)(1 + 2 + 3)(4 + 5 + 6 + 7)(8 + 9) = 3y / (2 + 4)",
    "(a + b + c + d)(1 + 2)(3 + 4)(5 + 6)(7 + 8) = e",
]


time_taken = []
for _ in range(100):
    start = time.time()

    ### CODE IN BETWEEN THESE LINES IS PROFILED ###

    for equation in BENCHMARKING_SUITE:
        ans = lineq.simplify_equation(equation)

    ### CODE IN BETWEEN THESE LINES IS PROFILED ###

    end = time.time()
    time_taken.append(end - start)

print(f"mean: {statistics.mean(time_taken)}s, stdev: {statistics.stdev(time_taken)}s")
