"""
Feature modules for the Homemaidy navigation backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- exceptions.py: Module-specific exceptions (where the module raises any)

Modules communicate through interfaces, not concrete implementations.
"""
