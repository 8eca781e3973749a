"""
Daily fortune lifecycle.

Decides whether today's fortune is already known, fetches and persists a
new one on request, and drives the INITIAL → LOADING → FORTUNE views.
"""
