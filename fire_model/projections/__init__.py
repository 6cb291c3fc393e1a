"""
Projections package: growth kernel, strategy evaluators, reporting and CLI.
"""
