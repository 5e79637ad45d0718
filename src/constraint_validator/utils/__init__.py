# src/constraint_validator/utils/__init__.py
