"""
Transport-agnostic core.

Components:
- command_parser.py: raw line -> ParsedCommand
- errors.py: InputError / ValidationError / PersistenceError
- assistant.py: respond(state, line) -> Reply
- persona.py: reply texts
- state.py, ports.py: session state and the storage port
"""
