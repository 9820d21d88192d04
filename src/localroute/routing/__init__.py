"""Routing — localized route registry and URL resolution.

Routes are registered per culture during startup and read without
locking afterwards.
"""
