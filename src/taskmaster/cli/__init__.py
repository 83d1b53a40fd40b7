"""
Process entrypoint.

Components:
- bootstrap.py: startup pipeline and shutdown
- main.py: argument parsing and the `taskmaster` console script
"""
