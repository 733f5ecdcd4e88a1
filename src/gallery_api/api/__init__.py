"""Gallery API — FastAPI REST API layer.

This package contains the FastAPI application, Pydantic request/response
models, and the in-memory gallery store.

Modules
-------
main
    FastAPI application factory, route handlers and the ``main()`` CLI
    entry point.
models
    Pydantic models for API request and response bodies.
gallery_store
    Lock-guarded in-memory gallery item store.
identifiers
    Parsing of item identifiers from paths and query strings.
cors
    Middleware adding permissive CORS headers and answering preflights.
"""
