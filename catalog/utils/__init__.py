"""
Utilities Package

Helper functions used across the application:
- dates.py: date formatting for forms and display
"""
