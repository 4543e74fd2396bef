"""
Shared utilities - statistics, parameter parsing, scoring, error handling
"""
