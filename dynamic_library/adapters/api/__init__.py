"""Clients HTTP des sources externes, cache et gestion des tokens."""
