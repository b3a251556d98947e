"""Application configuration and constants.

Tab orders, route orders and transition parameters. Everything here is
static and rebuilt on every start; navigation history is never persisted.
"""

# Routes
DEFAULT_ROUTE = "timing"
MAX_HISTORY = 50

ROUTES_DESKTOP = ("timing", "accounting", "notes", "data", "settings", "about")
ROUTES_MOBILE = ("timing", "accounting", "notes", "system")

# Pages reached from the system overview; they animate without a lateral offset.
SYSTEM_OVERVIEW = "system"
SYSTEM_DETAIL_ROUTES = (
    "data-export",
    "data-import",
    "data-backup",
    "data-sync",
    "data-cleanup",
)

# In-page tab orders (left to right), keyed by tab group.
TAB_ORDER: dict[str, tuple[str, ...]] = {
    "timing": ("dashboard", "tasks", "categories", "statistics"),
    "accounting": ("overview", "accounts", "transactions", "stats"),
    "notes": ("overview", "editor", "library", "stats"),
    "system": ("overview", "data", "settings", "about"),
    "routes.desktop": ROUTES_DESKTOP,
    "routes.mobile": ROUTES_MOBILE,
}

# Transitions
NARROW_WIDTH_THRESHOLD = 768  # px; below this the narrow/mobile parameters apply
SLIDE_OFFSET_PX = 300
SLIDE_BLUR_RADIUS = 4.0
SLIDE_DURATION_MS = 300
TAB_OFFSET_PX = 50
TAB_BLUR_RADIUS = 2.0
TAB_DURATION_MS = 250
DETAIL_DURATION_MS = 250
NARROW_MAX_DURATION_MS = 200
NARROW_OFFSET_SCALE = 0.5
SPRING_STIFFNESS = (300, 400)  # (wide, narrow)
SPRING_DAMPING = (30, 35)

# Status banner
STATUS_MESSAGE_TIMEOUT_MS = 5000
