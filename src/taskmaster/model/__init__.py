"""
Model subsystem.

Components:
- identity.py: IdentityAllocator (next task id to hand out)
- task.py / employee.py: immutable records (Task, TaskStatus, Employee)
- store.py: EntityStore, the single owner of tasks and employees
- sample_data.py: starter dataset + the demo assignment fixture
- user_prefs.py: UserPrefs and GuiSettings
"""
