"""Application service layer for Pointlist.

Services:
    session - TaskSession, the owned state a presentation shell drives

Example usage:
    >>> from pointlist.application import TaskSession
    >>>
    >>> session = TaskSession(next_task="eat the frog 20pts")
    >>> session.submit_add()
    >>> session.tasks[0].points
    20
"""

from pointlist.application.session import TaskSession

__all__ = ["TaskSession"]
