"""Service wiring."""
import logging
from pathlib import Path
from typing import Optional, Union

from food_ordering.core.config import Settings, settings as default_settings
from food_ordering.core.errors import EmptyCatalogError, MenuFileError
from food_ordering.services.menu.catalog import MenuCatalog
from food_ordering.services.ordering.service import OrderingService

logger = logging.getLogger(__name__)


def load_catalog(menu_file: Union[str, Path]) -> MenuCatalog:
    """Load the catalog from the menu file, falling back to the default menu."""
    catalog = MenuCatalog()
    try:
        catalog.load(menu_file)
    except (MenuFileError, EmptyCatalogError) as e:
        logger.warning(f"[CATALOG] {e} Using default menu.")
        catalog.load_defaults()
    return catalog


def get_ordering_service(settings: Optional[Settings] = None) -> OrderingService:
    """Get an ordering service for the configured menu file."""
    settings = settings or default_settings
    return OrderingService(
        catalog=load_catalog(settings.menu_file),
        menu_path=settings.menu_file,
    )
