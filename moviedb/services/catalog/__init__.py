"""Catalog retrieval and aggregation.

Usage:
    from moviedb.services.catalog.movies import MovieService

    service = MovieService(CatalogStore(session))
    result = service.search(title="Matrix", page="1")
"""
