"""Constants for the ESC/POS network printer transport."""

# Configuration keys
CONF_HOST = "host"
CONF_PORT = "port"
CONF_TIMEOUT = "timeout"
CONF_PAPER_SIZE = "paper_size"
CONF_PROFILE = "profile"
CONF_SPACE_BETWEEN_ROWS = "space_between_rows"
CONF_DISCONNECT_DELAY_MS = "disconnect_delay_ms"

# Default values
DEFAULT_PORT = 9100
DEFAULT_TIMEOUT = 5.0
DEFAULT_PAPER_SIZE = "80mm"
DEFAULT_SPACE_BETWEEN_ROWS = 5
DEFAULT_DISCONNECT_DELAY_MS = 0

# Bounds
MIN_TIMEOUT = 0.1
MAX_TIMEOUT = 120.0
MAX_FEED_LINES = 255
MAX_BEEP_TIMES = 9
MAX_DISCONNECT_DELAY_MS = 60_000

# Raw control sequences not covered by python-escpos helpers
ESC = b"\x1b"
GS = b"\x1d"
FS = b"\x1c"
DLE = b"\x10"
EOT = b"\x04"
LF = b"\n"

KANJI_ON = FS + b"&"
KANJI_OFF = FS + b"."
KANJI_PRINT_MODE = FS + b"!"
REVERSE_FEED = ESC + b"e"
PRINT_AND_FEED_DOTS = ESC + b"J"
TRANSMIT_STATUS = DLE + EOT

# Status reply: upper nibble is reserved
STATUS_MASK = 0x0F

# Number of grid units a PosColumn row must add up to
ROW_GRID_UNITS = 12
