"""
HTML views rendered as plain strings.
"""
