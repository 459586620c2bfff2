"""
Bootstrap routines for each process role.

Each module is imported only when its role is selected.
"""
