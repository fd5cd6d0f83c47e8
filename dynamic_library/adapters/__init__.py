"""Adaptateurs : clients des sources externes, fournisseurs de catalogue, CLI."""
