"""
Members Portal - session-based sign up and login for a members-only page.
"""
