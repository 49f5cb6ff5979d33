"""Pydantic data models for ontology inventories and shape constraints."""
