# src/constraint_validator/core/__init__.py
