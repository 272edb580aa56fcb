from pathlib import Path

# Repo-root conventional directories/files (overrideable on the command line)
CONFIG_DIR = Path("configs")
EXTRACTION_CONFIG_FILE = CONFIG_DIR / "extraction.yaml"

