"""Inventory of medicines and parapharmacy products stored in SQLite, with a command-line front end."""

__version__ = "0.1.0"
__all__ = ["database", "medicament", "para", "cli"]