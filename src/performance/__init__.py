"""
performance - Measurement and analysis of the sorting & search algorithms

The three modules build on each other:

    benchmarks  - Single-shot timing harness.  Wraps exactly one call of a
                  sort or search operation and returns an immutable
                  BenchmarkResult (optionally with a tracemalloc peak).

    analyzer    - Generates the seeded product dataset, drives all six
                  algorithms through the harness on private copies, and
                  derives the winners and advisories into an AnalysisResult.

    advisor     - Static rules of thumb for choosing an algorithm, pagination
                  strategy or memory trade-off before anything is measured.

Everything here is single-threaded: a benchmark must not share the CPU with
another benchmark from the same pass.
"""
