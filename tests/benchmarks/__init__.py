"""Benchmarks for the fragment argument linter

Benchmarks are disabled (only executed as tests) by default in setup.cfg.
You can enable them with --benchmark-enable if your want to execute them.
"""
