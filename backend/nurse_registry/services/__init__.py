"""Services Layer — the record store behind the HTTP routes.

Invariants:
    - Routes never touch the ORM directly; every read and write goes through NurseStore
    - Store methods raise typed domain errors (core/errors.py), never raw SQLAlchemy errors

Design Decisions:
    - One store class per resource; a single resource here, so a single module
"""
