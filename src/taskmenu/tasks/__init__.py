"""
Task subsystem.

Components:
- task_models.py: the Task record and its on-disk field names
- task_store.py: ordered in-memory list with position-indexed mutations
- task_file.py: whole-file JSON load/save with an atomic replace
"""
