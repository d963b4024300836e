"""
Task API - Tasks Module

Per-user task CRUD.
"""

from taskapi.tasks.router import router as tasks_router

__all__ = ["tasks_router"]
