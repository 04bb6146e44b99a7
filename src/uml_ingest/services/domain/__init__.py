"""
Domain Layer

This package contains the ingestion logic organized by domain area.
Domain services implement the core algorithms and work on already-decoded
documents; reading files is left to the services layer (document_loader).

Domains:
- xmi: UML class-diagram (XMI) ingestion into parsed data
"""
