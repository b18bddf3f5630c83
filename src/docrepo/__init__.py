"""
docrepo – generic document-collection access layer.

Import path convention::

    from docrepo.adapters.mongodb import MongoCollectionRepository, PlainQuery
    from docrepo.application.pagination import build_query_parameters
    from docrepo.kernel.errors import StoreQueryFailedError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
