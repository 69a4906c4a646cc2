"""
captain_log: a single-user task tracker driven by free-text commands.

Packages:
- tasks/: task model, in-memory task list, flat-file storage codec
- core/: command parser, errors, orchestration (respond), reply texts
- cli/: command handlers, bootstrap (composition root), entrypoint
- connectors/: console front end
"""
