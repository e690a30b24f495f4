"""Shared test fixtures and configuration."""
import io

import pytest
from rich.console import Console

from food_ordering.core.config import Settings
from food_ordering.services.menu.catalog import MenuCatalog
from food_ordering.services.ordering.service import OrderingService


TEST_MENU_TEXT = "burger,10.00\nfries, large,3.50\nsoda,2.00\n"


@pytest.fixture
def test_menu_path(tmp_path):
    """Write a three-item menu file and return its path."""
    path = tmp_path / "menu_data.txt"
    path.write_text(TEST_MENU_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def test_catalog(test_menu_path):
    """Create catalog loaded from the test menu file."""
    catalog = MenuCatalog()
    catalog.load(test_menu_path)
    return catalog


@pytest.fixture
def default_catalog():
    """Create catalog holding the built-in default menu."""
    return MenuCatalog.default()


@pytest.fixture
def ordering_service(default_catalog, tmp_path):
    """Create ordering service over the default menu, saving into tmp_path."""
    return OrderingService(catalog=default_catalog, menu_path=tmp_path / "saved_menu.txt")


@pytest.fixture
def test_settings(test_menu_path):
    """Override settings for testing."""
    return Settings(
        menu_file=test_menu_path,
        shop_name="Test Shop",
        currency_symbol="$",
        log_level="DEBUG",
    )


@pytest.fixture
def test_console():
    """Create a plain-text console writing into a buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)
