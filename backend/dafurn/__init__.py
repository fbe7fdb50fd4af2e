"""Dafurn Exchange backend: CRUD API over marketplace user profiles."""
