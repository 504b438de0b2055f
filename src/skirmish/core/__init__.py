"""Core primitives for Skirmish.

Architecture Note:
    core/ holds stateless building blocks (entity model, builder, wrapper).
    Coordination of two entities lives in session/.
"""
