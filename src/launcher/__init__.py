"""
Process launcher.

Dispatches to either the files API process or a queue worker process based on
the role given on the command line.
"""
