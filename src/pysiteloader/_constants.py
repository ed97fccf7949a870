"""Internal constants shared across the library."""

DEFAULT_BASE_PATH = "./assets/data/"

#: Storage keys for the cached content blob and its capture time (epoch ms).
CACHE_KEY = "site_data_cache"
TIMESTAMP_KEY = "site_data_timestamp"

#: Bumped whenever the persisted snapshot layout changes.
SNAPSHOT_SCHEMA_VERSION = 1

DEFAULT_EXPIRATION_SECONDS = 3600

SECTION_NAMES: tuple[str, ...] = (
    "site",
    "personal_info",
    "key_metrics",
    "academic_information",
    "professional_experience",
    "expertise_achievements",
    "skills",
    "honors_awards",
    "courses_trainings_certificates",
    "projects",
    "memberships",
    "sessions_events",
    "languages",
    "portfolios",
    "volunteering_services",
    "publications",
    "contact_details",
    "ea_logo",
    "copyright",
    "diary",
    "gallery",
)

# ------------------------------------------------------------------
# Page identity
# ------------------------------------------------------------------

MAIN_MENU_PAGES: frozenset[str] = frozenset({"index.html", "", "printable_cv.html"})
PRINT_VIEW_PAGE = "printable_cv.html"
PRINT_VIEW_HOME_URL = "./index.html#about"

# ------------------------------------------------------------------
# Mount points
# ------------------------------------------------------------------

HEADER_ID = "header"
NAVMENU_ID = "navmenu"
MENU_FOOTER_ID = "menu_footer"
PAGE_FOOTER_ID = "footer"
STANDARD_SECTION_ID = "standard-page-section"
ONE_PAGE_SECTION_ID = "one-page-section"
MODE_SELECTOR_ID = "cvModeSelector"

MODE_QUERY_PARAM = "mode"

#: Social platforms that are never rendered in the header.
SOCIAL_LINK_DENYLIST: frozenset[str] = frozenset({"google-old", "researchgate-old", "researchgate-fab"})

AUTO_YEAR = "AUTO"
