"""
Global constants used throughout the project
"""

import os

DATA = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")

DEFAULT_VARIANT = "weighted-pc"
DEFAULT_SEED = 0

LOG_FORMAT = "%(levelname)s | %(message)s"

# Benchmark defaults: universe size and number of random pairs
BENCHMARK_N = 10_000
BENCHMARK_M = 20_000
