# src/constraint_validator/validators/__init__.py
