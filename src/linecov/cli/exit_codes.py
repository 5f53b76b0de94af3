# mirror <sysexits.h>, except the coverage gate which owns status 1
EXIT_OK = 0  # Normal success
EXIT_THRESHOLD = 1  # Total coverage below minimum_coverage
EXIT_DATAERR = 65  # Input data was invalid (e.g., non-numeric coverage cell)
EXIT_NOINPUT = 66  # Input file not found
EXIT_CONFIG = 78  # Invalid configuration (e.g., bad pyproject.toml or --sort chain)
