"""Routing: path templates with named segments and specificity scoring.

Patterns are parsed and compiled once at registration time; matching a
concrete request path is a single regex match.
"""
