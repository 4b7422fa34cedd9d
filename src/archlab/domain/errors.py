"""Exception hierarchy for failures that are not validator findings.

Dangling references and modeling smells are reported as findings by
:mod:`archlab.domain.validation`, never raised. Only malformed input and
misuse of the graph/store APIs raise.
"""

from __future__ import annotations


class ArchlabError(Exception):
    """Base class for all archlab errors."""


class GraphImportError(ArchlabError, ValueError):
    """A serialized graph could not be parsed into a DomainGraph."""


class DuplicateNodeError(ArchlabError, ValueError):
    """A node with the same id already exists in the graph."""


class NodeNotFoundError(ArchlabError, LookupError):
    """No node with the given id exists in the addressed collection."""


class ProjectNotFoundError(ArchlabError, LookupError):
    """No stored project with the given name."""
