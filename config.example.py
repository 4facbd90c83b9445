"""
Example configuration file for the Avgle catalog client
Copy this file to config.py and adjust the values
"""

# === API Configuration ===
AVGLE_BASE_URL = 'https://api.avgle.com/v1'
AVGLE_REQUEST_TIMEOUT = 30  # Seconds, or a (connect, read) tuple

# === Logging Configuration ===
LOG_LEVEL = 'INFO'  # Options: DEBUG, INFO, WARNING, ERROR, CRITICAL
CATALOG_QUERY_LOG_FILE = 'logs/catalog_query.log'
