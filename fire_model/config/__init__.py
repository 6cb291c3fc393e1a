"""
Config package: planner YAML loading, validation and scenario resolution.
"""
