"""
Command line interface for spamBench.
"""
