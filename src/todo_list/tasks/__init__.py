"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskFilter, DueBucket) and due date parsing
- task_store.py: in-memory collection persisted as one JSON value in a key-value storage
"""
