"""PhyloPic silhouette data source.

API docs: https://api.phylopic.org/

Public API:
  - client: Low-level HTTP (media types, error translation)
  - models: ImageIndexResponse, ImageIndexResult
  - images: query_images, extract_uuid, vector_url
  - vectors: download_vector
"""

from species_marker.datasources.phylopic.images import (
    build_query_params,
    extract_uuid,
    query_images,
    vector_url,
)
from species_marker.datasources.phylopic.models import ImageIndexResponse, ImageIndexResult
from species_marker.datasources.phylopic.vectors import download_vector

__all__ = [
    "ImageIndexResponse",
    "ImageIndexResult",
    "build_query_params",
    "download_vector",
    "extract_uuid",
    "query_images",
    "vector_url",
]
