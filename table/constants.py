import os


def env_cell_width() -> int:
    """Read ``TABLE_CELL_WIDTH`` now, so values loaded from a ``.env`` file count."""
    return int(os.getenv("TABLE_CELL_WIDTH", "20"))


# Width (in characters) of every cell in the boxed text rendering.
DEFAULT_CELL_WIDTH: int = env_cell_width()

# Text shown in the top-left cell, where the header row meets the identifier column.
DEFAULT_TABLE_HEADER: str = os.getenv("TABLE_HEADER", "")
