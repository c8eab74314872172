"""
Task subsystem.

Components:
- task_models.py: the Task entity and its persisted (dict) form
- task_store.py: whole-collection storage on top of a key-value store + upsert
- task_api.py: small high-level helpers used by the rest of the app
"""
