from restaurateur.core.config import PORT

bind = f"0.0.0.0:{PORT}"
# The store lives in process memory, so a single worker serves every request
workers = 1
threads = 4
