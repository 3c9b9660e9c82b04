"""
Domain package - Core business logic with no external dependencies.

This package contains pure Python domain models and calculation rules
for aggregating sales and computing representative dividends.
"""
