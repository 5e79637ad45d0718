# src/constraint_validator/api/__init__.py
