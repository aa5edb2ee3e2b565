class InvalidInput(ValueError):
    """Raised when a caller hands the engine an unusable argument"""
