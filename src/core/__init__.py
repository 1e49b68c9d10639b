"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of scale conversion:
guarded numeric transforms, the Scale value object, and the JSON Schema
contracts for scale configuration.
"""
