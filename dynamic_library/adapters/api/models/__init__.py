"""Modeles pydantic des reponses des sources externes."""
