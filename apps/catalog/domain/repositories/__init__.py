from .catalog_view import CatalogView

__all__ = ['CatalogView']
