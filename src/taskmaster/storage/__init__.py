"""
Persistence subsystem.

Components:
- json_util.py: per-path locking, tolerant JSON reads, temp-file + rename writes
- entity_storage.py: task/employee data file
- prefs_storage.py: user preferences file
- storage_manager.py: the single Storage handle given to the logic layer
"""
