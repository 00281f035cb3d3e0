"""Benchmark URLs or git branches with ab and chart the results with gnuplot."""

__version__ = "0.1.0"
