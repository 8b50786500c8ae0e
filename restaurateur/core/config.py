"""Application settings, read from the environment or a .env file"""
from decouple import config

# Logging
LOG_LEVEL = config('LOG_LEVEL', default='INFO')
LOG_DIR = config('LOG_DIR', default='logs')

# HTTP server
PORT = config('PORT', default=10000, cast=int)
HOST = config('HOST', default='0.0.0.0')

# Orders without an explicit date get this one; empty means today
DEFAULT_ORDER_DATE = config('DEFAULT_ORDER_DATE', default='')

# Minimum fuzzy score (0-100) for a "did you mean" hint
SUGGESTION_THRESHOLD = config('SUGGESTION_THRESHOLD', default=70, cast=int)

DONE_KEYWORD = config('DONE_KEYWORD', default='done')
