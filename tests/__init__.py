"""
Fast Music Generator test suite.
"""
