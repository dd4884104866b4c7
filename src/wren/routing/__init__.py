"""Routing — typed path patterns matched in declaration order.

Patterns are composed with ``/``, bound to handlers with ``@``, and
collected into an immutable ``Router`` that is queried per request.
"""
