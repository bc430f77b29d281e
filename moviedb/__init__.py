"""Movie catalog REST API.

Read-mostly catalog of films, credited persons and ratings, with a small
user profile facility gated by bearer tokens.
"""
