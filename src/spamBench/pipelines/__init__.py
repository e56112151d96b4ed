"""
Command pipelines for spamBench.
"""
