"""
CookBook App backend.

Progress updates: users record how they are doing against a learning plan
and read their own history back.
"""
