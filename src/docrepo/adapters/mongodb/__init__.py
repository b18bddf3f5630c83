"""MongoDB adapter – generic collection repository on top of motor.

Requires ``motor`` (which brings ``pymongo`` and ``bson``)::

    pip install docrepo
"""

from docrepo.adapters.mongodb.connection import MongoConnection
from docrepo.adapters.mongodb.cursor import AggregationCursor, compose_cursor
from docrepo.adapters.mongodb.entities import ConstructorEntityFactory, EntityFactory
from docrepo.adapters.mongodb.identifiers import ID_FIELD, is_structured_id, sanitize_id
from docrepo.adapters.mongodb.repository import CollectionProvider, MongoCollectionRepository
from docrepo.adapters.mongodb.settings import MongoSettings
from docrepo.adapters.mongodb.sources import PipelineQuery, PlainQuery, QuerySource

__all__ = [
    "ID_FIELD",
    "AggregationCursor",
    "CollectionProvider",
    "ConstructorEntityFactory",
    "EntityFactory",
    "MongoCollectionRepository",
    "MongoConnection",
    "MongoSettings",
    "PipelineQuery",
    "PlainQuery",
    "QuerySource",
    "compose_cursor",
    "is_structured_id",
    "sanitize_id",
]
