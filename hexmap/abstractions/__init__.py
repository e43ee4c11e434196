"""Abstractions: data model types and collaborator interfaces."""
