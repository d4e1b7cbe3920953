"""
============================================================
CRC CARD
============================================================
Package: workdesk.infrastructure.repositories

Responsibilities:
- Concrete repository implementations: postgres/ (raw SQL) and
  in_memory/ (tests / volatile environments).
============================================================
"""
