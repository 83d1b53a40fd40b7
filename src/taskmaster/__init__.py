"""
TaskMasterPro core.

Packages:
- model: task/employee records, the id allocator and the in-memory EntityStore
- storage: JSON persistence for entities and user preferences
- cli: bootstrap pipeline (composition root) and the process entrypoint
"""

__version__ = "0.2.2"
VERSION_LABEL = f"{__version__}ea"
