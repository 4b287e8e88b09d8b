"""Secret Santa rooms service package."""
