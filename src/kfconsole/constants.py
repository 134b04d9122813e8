"""
Constants and key mappings for kfconsole.

Centralizes layout numbers, key names, menu entries and user-facing
messages used throughout the application.
"""


# =============================================================================
# Event Loop
# =============================================================================

# Bounded wait for each input poll, in seconds
POLL_TIMEOUT_SECONDS = 0.1

# Rows taken by borders, headers, menu bar and footer
FIXED_CHROME_ROWS = 19


def compute_visible_rows(terminal_height: int) -> int:
    """Number of rows a page step moves for the given terminal height."""
    return max(0, terminal_height - FIXED_CHROME_ROWS)


# =============================================================================
# Key Names (Textual key naming)
# =============================================================================

KEY_UP = "up"
KEY_DOWN = "down"
KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_PAGE_UP = "pageup"
KEY_PAGE_DOWN = "pagedown"
KEY_TAB = "tab"
KEY_ENTER = "enter"
KEY_ESCAPE = "escape"
KEY_BACKSPACE = "backspace"
KEY_SPACE = "space"
KEY_INTERRUPT = "ctrl+c"

# Keys that are captured as bindings rather than typed characters
SPECIAL_KEYS = [
    KEY_UP,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_PAGE_UP,
    KEY_PAGE_DOWN,
    KEY_TAB,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_BACKSPACE,
    KEY_SPACE,
    KEY_INTERRUPT,
]


# =============================================================================
# Menu
# =============================================================================

MENU_HELP = "Help"
MENU_IMPORT = "Import"
MENU_EXPORT = "Export"
MENU_ABOUT = "About"
MENU_EXIT = "Exit"

MENU_ITEMS = [MENU_HELP, MENU_IMPORT, MENU_EXPORT, MENU_ABOUT, MENU_EXIT]


# =============================================================================
# Record Attributes
# =============================================================================

WORKLOAD_SERVICE = "service"
WORKLOAD_POD = "pod"
WORKLOAD_PROXY = "proxy"

ALL_WORKLOAD_TYPES = [WORKLOAD_SERVICE, WORKLOAD_POD, WORKLOAD_PROXY]

PROTOCOL_TCP = "tcp"
PROTOCOL_UDP = "udp"

DEFAULT_LOCAL_ADDRESS = "127.0.0.1"


# =============================================================================
# Messages
# =============================================================================

DELETE_CONFIRMATION_PROMPT = "Are you sure you want to delete the selected configs?"
DELETE_SUCCESS_MESSAGE = "Configs deleted successfully."
DELETE_FAILURE_PREFIX = "Failed to delete configs"

IMPORT_SUCCESS_TEMPLATE = "Imported {count} config(s) from {path}"
EXPORT_SUCCESS_TEMPLATE = "Configs exported successfully to {path}"
