"""
Benchmark suite for jsontree parsing performance.

Compares jsontree against established JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures parsing speed and memory usage across different document shapes.
"""
