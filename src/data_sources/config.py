from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directory holding the fetched records
DATA_DIR = PROJECT_ROOT / "data"

# Record file names inside a data directory
CLIENTS_FILE = "clients.json"
CLIENTS_CSV_FILE = "clients.csv"  # used only when CLIENTS_FILE is absent
EXECUTOR_FILE = "executor.json"

# Column names for the CSV client export
CSV_COORDINATE_COLUMNS = ["x", "y", "z"]
DEMANDS_SEPARATOR = ";"

# Per-fetch timeout; a fetch that exceeds it becomes a failure result
FETCH_TIMEOUT_SECONDS = 10.0
