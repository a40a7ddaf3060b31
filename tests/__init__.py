"""
tests

Test package (lets test modules share `tests.support`).
"""
