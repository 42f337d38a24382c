"""Option core domain layer.

Option entity and the constraint payloads that tag its kind. No I/O.
"""
