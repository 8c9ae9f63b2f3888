"""
Feature modules for Travel Modes.

Each feature is a self-contained module with:
- schemas.py - Pydantic schemas
- service.py - Business logic
- calculators/ - Calculation logic (optional)
"""
