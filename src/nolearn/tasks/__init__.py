"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus)
- task_store.py: in-memory list + cursor, JSON load/save, mutations
"""

from .task_models import Task, TaskStatus
from .task_store import TaskStore

__all__ = ["Task", "TaskStatus", "TaskStore"]
