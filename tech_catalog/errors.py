"""Exceptions raised by the catalog sync pipeline."""


class CatalogError(Exception):
    """Base class for sync pipeline failures."""


class SourceFetchError(CatalogError):
    """An external source could not be fetched."""


class SourceParseError(CatalogError):
    """An external source returned a payload that could not be parsed."""


class CatalogStoreError(CatalogError):
    """A write to the catalog database failed."""
