"""Application-level constants."""

# Run identification
RUN_ID_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
RUN_ID_PREFIX = "cgclosure"
