"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, client/, or db/
    - Sort, filter, age derivation and client state are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: routes and the CLI are the shell
"""
