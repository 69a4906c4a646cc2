"""
Task subsystem.

Components:
- task_models.py: task variants (Todo, Deadline, Event) and their invariants
- datetime_format.py: strict input/storage pattern + display pattern
- task_list.py: ordered in-memory collection with 1-based bulk operations
- task_file.py: line codec + whole-file load/save
"""
