"""litcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    easter,
    anchors,
    ferial_name,
    season_name,
    list_attributes,
    compute_calendar,
    day_info,
    explain,
    list_catalogs,
    catalog_info,
    register_catalog,
)
from .catalogs.loader import catalog_from_records, load_catalog
from .core.errors import ConfigurationError, LitcalError
from .core.types import (
    CalendarConfig,
    CalendarYear,
    Diagnostics,
    EventCatalog,
    Grade,
    Jurisdiction,
    JurisdictionLevel,
    LitSeason,
    LiturgicalEvent,
    Outcome,
    PrecedenceTable,
    ReadingsType,
    ResolvedDay,
    ResolvedEntry,
    YearType,
)

__all__ = [
    "easter",
    "anchors",
    "ferial_name",
    "season_name",
    "list_attributes",
    "compute_calendar",
    "day_info",
    "explain",
    "list_catalogs",
    "catalog_info",
    "register_catalog",
    "catalog_from_records",
    "load_catalog",
    "ConfigurationError",
    "LitcalError",
    "CalendarConfig",
    "CalendarYear",
    "Diagnostics",
    "EventCatalog",
    "Grade",
    "Jurisdiction",
    "JurisdictionLevel",
    "LitSeason",
    "LiturgicalEvent",
    "Outcome",
    "PrecedenceTable",
    "ReadingsType",
    "ResolvedDay",
    "ResolvedEntry",
    "YearType",
]
