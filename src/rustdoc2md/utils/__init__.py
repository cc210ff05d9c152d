#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Internal helpers shared across rustdoc2md modules."""
