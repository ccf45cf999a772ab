"""SSR check: heuristic detection of projects that need server-side rendering."""

__version__ = "0.1.0"
