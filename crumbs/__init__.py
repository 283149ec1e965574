"""Work-item coordination model: crumbs, trails, properties, metadata, links, stashes and storage interfaces."""

__version__ = "0.1.0"