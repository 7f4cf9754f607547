"""Pure domain layer for Pointlist.

Nothing in this package performs I/O. Task parsing, the task reducer and
the edit-session tracker all take data in and return new data out.
"""
