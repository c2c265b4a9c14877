"""
Spreadsheet add-on that checks cell text for typos and grammar with a chat completion API.
"""

__version__ = "0.1.0"
