"""
Schema package: canonical column names shared by readers, writers and reports.
"""
