"""monthgrid - monthly calendar with overlap-aware event layout."""
