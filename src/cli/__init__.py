"""CLI module for Location documents."""

from src.cli.codes import app as codes_app
from src.cli.documents import app as document_app
from src.cli.main import app, main
from src.cli.roles import app as roles_app

__all__ = ["app", "codes_app", "document_app", "main", "roles_app"]
