class ShapeError(ValueError):
    """Feature count of an input does not match what the dataset/model expects."""
