"""Garbageman Embassy platform modules.

Each module follows the same layering:
- core: entities, value objects, and protocols with no I/O
- application: services and validators orchestrating the core
- infrastructure: adapters that talk to files or the network

Modules:
- options: option kinds, constraints, and validation
- schema: the ordered configuration schema and its display rendering
- store: get/set of the configuration value
- health: timeout-bounded health probes
- migrations: versioned configuration transforms
- properties: masked read-only projection of the configuration
"""
