"""
State package: tracked accounts, net-worth aggregation and history snapshots.
"""
