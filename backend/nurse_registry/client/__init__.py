"""Client Layer — API client, table view controller, and export for the nurse registry.

Invariants:
    - Client code talks to the server only over HTTP (never imports services/ or models/)
    - Client state lives in core/nurse_collection.py, owned by the view controller
"""
