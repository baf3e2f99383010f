class GeneratorFailure(Exception):
    """Raised when a generator cannot produce its file."""
