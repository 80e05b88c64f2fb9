from triples.cli.app import app

__all__ = ["app"]
