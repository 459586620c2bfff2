"""
Queue worker components.

Contains the queue enumeration, the worker modules that can be started for
each queue, and the headless application context that hosts them.
"""
