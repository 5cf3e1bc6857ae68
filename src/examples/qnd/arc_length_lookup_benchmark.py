# arc_length_lookup_benchmark.py
# Run with: python arc_length_lookup_benchmark.py

import timeit

import numpy as np

from arcparam.curve import CubicCurve

curve = CubicCurve((0.0, 300.0), (440.0, 0.0), (-200.0, 0.0), (240.0, 300.0))
table = curve.arc_length_table

COUNTS_LIST = [2, 5, 10, 20, 50, 80, 100, 200, 500, 1_000, 5_000]


# Version 1: one binary search per wanted length
def binary_search(count: int):
    lengths = np.arange(count, dtype=np.float64) / (count - 1) * table.total_length
    return [table.parameter_at_length(length) for length in lengths]


# Version 2: one forward scan over all wanted lengths
def forward_scan(count: int):
    lengths = np.arange(count, dtype=np.float64) / (count - 1) * table.total_length
    return table.parameters_at_lengths(lengths)


versions = {
    "Binary search": binary_search,
    "Forward scan": forward_scan,
}

print("Arc Length Lookup Benchmark (lower = better)")
print(" Count  |  Binary search   |   Forward scan   | Fastest")
print("-" * 60)

for count in COUNTS_LIST:
    timings = {}
    # Auto-scale repeats so each test takes reasonable time
    repeats = max(1, 20_000 // count)

    for name, func in versions.items():
        dt = timeit.timeit(lambda: func(count), number=repeats)
        timings[name] = dt * 1000 / repeats  # ms per call

    fastest = min(timings, key=timings.get)
    print(f"{count:6}  |  {timings['Binary search']:9.3f} ms  |  {timings['Forward scan']:9.3f} ms  |  {fastest}")

# Both versions must agree
for count in COUNTS_LIST:
    assert np.allclose(binary_search(count), forward_scan(count)), f"Lookups differ for count={count}"
print("\nBoth lookups agree for all counts.")
