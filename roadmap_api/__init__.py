"""Roadmap API Package — REST service for roadmap templates, areas, phases, and tasks.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
